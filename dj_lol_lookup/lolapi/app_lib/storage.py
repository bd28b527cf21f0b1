from lolapi.models import Summoner, Match, MatchParticipant, MatchTeam
from lolapi.app_lib.repositories import SummonerRepository, MatchRepository, ParticipantRepository, TeamRepository
from lolapi.app_lib.scoring import round_half_up
from django.db import transaction
from django.db.models import Avg, Count, Prefetch, Q
from django.utils import timezone
import logging

logger = logging.getLogger(__name__)

summoners = SummonerRepository()
matches = MatchRepository()
participants = ParticipantRepository()
teams = TeamRepository()

# Post-game stat (match-v5 key) => MatchParticipant column
PARTICIPANT_STATS = {
    'championId': 'champion_id',
    'championName': 'champion_name',
    'teamId': 'team_id',
    'teamPosition': 'team_position',
    'kills': 'kills',
    'deaths': 'deaths',
    'assists': 'assists',
    'totalDamageDealtToChampions': 'total_damage_dealt_to_champions',
    'totalDamageTaken': 'total_damage_taken',
    'totalHeal': 'total_heal',
    'goldEarned': 'gold_earned',
    'totalMinionsKilled': 'total_minions_killed',
    'neutralMinionsKilled': 'neutral_minions_killed',
    'visionScore': 'vision_score',
    'totalTimeCCDealt': 'total_time_cc_dealt',
    'timeCCingOthers': 'time_ccing_others',
}
TEXT_STATS = ('championName', 'teamPosition')
OBJECTIVES = ('champion', 'tower', 'inhibitor', 'baron', 'dragon')


def is_fresh(timestamp, window, now=None):
    if timestamp is None:
        return False
    return (now or timezone.now()) - timestamp < window


def find_player_by_identity(game_name, tag_line, region):
    return (Summoner.objects
            .filter(game_name__iexact=game_name, tag_line__iexact=tag_line, region=region.lower())
            .first())


def find_player_by_puuid(puuid):
    return summoners.find(puuid=puuid)


def upsert_player(api_account_dict, api_summoner_dict, region):
    return summoners.upsert({'puuid': api_account_dict['puuid']}, {
        'game_name': api_account_dict.get('gameName') or '',
        'tag_line': api_account_dict.get('tagLine') or '',
        'region': region.lower(),
        'summoner_id': api_summoner_dict.get('id'),
        'profile_icon_id': api_summoner_dict.get('profileIconId') or 0,
        'summoner_level': api_summoner_dict.get('summonerLevel') or 0,
        'revision_date': api_summoner_dict.get('revisionDate'),
        'profile_updated_at': timezone.now(),
    })


def mark_matches_updated(summoner):
    summoner.matches_updated_at = timezone.now()
    summoner.save(update_fields=['matches_updated_at'])
    return summoner


def joined_matches():
    """Matches with participants (+ their summoner) and teams loaded in three queries"""
    return Match.objects.prefetch_related(
        Prefetch('participants', queryset=MatchParticipant.objects.select_related('summoner').order_by('id')),
        Prefetch('teams', queryset=MatchTeam.objects.order_by('team_id'))
    )


def find_cached_matches(puuid, limit):
    return list(joined_matches()
                .filter(participants__summoner__puuid=puuid)
                .order_by('-game_creation')[:limit])


def parse_participant_stats(api_participant_dict):
    fields = {}
    for api_key, column in PARTICIPANT_STATS.items():
        value = api_participant_dict.get(api_key)
        if value is None:
            value = '' if api_key in TEXT_STATS else 0
        fields[column] = value
    fields['win'] = bool(api_participant_dict.get('win'))
    fields['team_participant_id'] = api_participant_dict.get('teamParticipantId')
    return fields


def parse_team_objectives(api_team_dict):
    objectives = api_team_dict.get('objectives') or {}
    return {
        '{}_kills'.format(name): (objectives.get(name) or {}).get('kills') for name in OBJECTIVES
    }


def upsert_match(match_result, region):
    """
        Store one match-v5 payload: the match, its participants and its teams, all or nothing.
        Participants never seen before get a placeholder summoner (profile not fetched yet).
    """
    metadata = match_result['metadata']
    info = match_result['info']
    with transaction.atomic():
        match = matches.upsert({'match_id': metadata['matchId']}, {
            'data_version': metadata.get('dataVersion') or '',
            'platform_id': info.get('platformId') or '',
            'game_mode': info.get('gameMode') or '',
            'game_type': info.get('gameType') or '',
            'game_creation': info.get('gameCreation') or 0,
            'game_duration': info.get('gameDuration') or 0,
            'game_version': info.get('gameVersion') or '',
            'queue_id': info.get('queueId') or 0,
        })
        for p in info.get('participants', []):
            puuid = p.get('puuid')
            if not puuid:
                logger.debug("Match %s: skipping participant without puuid", match.match_id)
                continue
            summoner = summoners.get_or_create({'puuid': puuid}, {
                'game_name': p.get('riotIdGameName') or p.get('summonerName') or '',
                'tag_line': p.get('riotIdTagline') or '',
                'region': region.lower(),
            })
            participants.upsert({'match': match, 'summoner': summoner}, parse_participant_stats(p))
        for t in info.get('teams', []):
            teams.upsert({'match': match, 'team_id': t['teamId']}, dict(
                win=bool(t.get('win')),
                **parse_team_objectives(t)
            ))
    return joined_matches().get(pk=match.pk)


def summarize_player_stats(puuid):
    """Win rate, averages and top-5 most played champions over every stored match of the player"""
    played = MatchParticipant.objects.filter(summoner__puuid=puuid)
    stats = played.aggregate(
        games=Count('id'),
        wins=Count('id', filter=Q(win=True)),
        kills=Avg('kills'),
        deaths=Avg('deaths'),
        assists=Avg('assists'),
        damage=Avg('total_damage_dealt_to_champions'),
        gold=Avg('gold_earned'),
        vision=Avg('vision_score'),
    )
    total_games = stats['games']
    win_rate = round_half_up(stats['wins'] / total_games * 100, 2) if total_games > 0 else 0

    avg_kills = stats['kills'] or 0
    avg_deaths = stats['deaths'] or 0
    avg_assists = stats['assists'] or 0

    champion_stats = (played
                      .values('champion_name')
                      .annotate(games=Count('id'), kills=Avg('kills'), deaths=Avg('deaths'), assists=Avg('assists'))
                      .order_by('-games', 'champion_name')[:5])

    return {
        'totalGames': total_games,
        'winRate': win_rate,
        'averageStats': {
            'kills': round_half_up(avg_kills, 2),
            'deaths': round_half_up(avg_deaths, 2),
            'assists': round_half_up(avg_assists, 2),
            'kda': round_half_up((avg_kills + avg_assists) / avg_deaths, 2) if avg_deaths else 'Perfect',
            'damage': round_half_up(stats['damage'] or 0, 0),
            'gold': round_half_up(stats['gold'] or 0, 0),
            'visionScore': round_half_up(stats['vision'] or 0, 2),
        },
        'topChampions': [{
            'name': c['champion_name'],
            'games': c['games'],
            'avgKills': round_half_up(c['kills'] or 0, 2),
            'avgDeaths': round_half_up(c['deaths'] or 0, 2),
            'avgAssists': round_half_up(c['assists'] or 0, 2),
        } for c in champion_stats],
    }
