from lolapi.app_lib.storage import OBJECTIVES, PARTICIPANT_STATS


def format_participant(participant):
    summoner = participant.summoner
    formatted = {
        'puuid': summoner.puuid,
        'riotIdGameName': summoner.game_name,
        'riotIdTagline': summoner.tag_line,
        'win': participant.win,
        'teamParticipantId': participant.team_participant_id,
    }
    for api_key, column in PARTICIPANT_STATS.items():
        formatted[api_key] = getattr(participant, column)
    return formatted


def format_team(team):
    return {
        'teamId': team.team_id,
        'win': team.win,
        'objectives': {
            name: {'kills': getattr(team, '{}_kills'.format(name)) or 0} for name in OBJECTIVES
        },
    }


def format_match(match, participants, teams):
    """Stored match rows => the match-v5 shaped view; participants with no resolved summoner are left out"""
    resolved = [p for p in participants if p.summoner is not None]
    return {
        'metadata': {
            'matchId': match.match_id,
            'dataVersion': match.data_version,
            'participants': [p.summoner.puuid for p in resolved],
        },
        'info': {
            'gameId': match.match_id,
            'platformId': match.platform_id,
            'gameCreation': match.game_creation,
            'gameDuration': match.game_duration,
            'gameMode': match.game_mode,
            'gameType': match.game_type,
            'gameVersion': match.game_version,
            'queueId': match.queue_id,
            'participants': [format_participant(p) for p in resolved],
            'teams': [format_team(t) for t in teams],
        },
    }


def format_matches(matches):
    """For Match instances loaded with storage.joined_matches()"""
    return [format_match(m, m.participants.all(), m.teams.all()) for m in matches]
