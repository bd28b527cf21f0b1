from django.db import models


# Static game data


class Champion(models.Model):
    """Champion reference entry, keyed by its numeric Data Dragon key"""
    id = models.IntegerField(primary_key=True)
    key = models.CharField(max_length=255)  # String id, e.g. "MonkeyKing"
    name = models.CharField(max_length=255)
    title = models.CharField(max_length=255)
    thumbnail_url = models.CharField(max_length=255, blank=True, default='')
    splash_url = models.CharField(max_length=255, blank=True, default='')
    version = models.CharField(max_length=255)


# Player data


class Summoner(models.Model):
    """A player's account (riot id) and its profile on a given game server"""
    puuid = models.CharField(max_length=78, unique=True)
    game_name = models.CharField(max_length=255)
    tag_line = models.CharField(max_length=255)
    region = models.CharField(max_length=16)
    summoner_id = models.CharField(max_length=63, null=True)
    profile_icon_id = models.IntegerField(default=0)
    summoner_level = models.IntegerField(default=0)
    revision_date = models.BigIntegerField(null=True)
    # Null for placeholder rows created from match payloads
    profile_updated_at = models.DateTimeField(null=True)
    matches_updated_at = models.DateTimeField(null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [models.Index(fields=['game_name', 'tag_line'], name='lolapi_summoner_riot_id_idx')]


# Match history data


class Match(models.Model):
    """A match that has ended, as reported by match-v5"""
    match_id = models.CharField(max_length=64, unique=True)
    data_version = models.CharField(max_length=16, blank=True, default='')
    platform_id = models.CharField(max_length=16, blank=True, default='')
    game_mode = models.CharField(max_length=64, blank=True, default='')
    game_type = models.CharField(max_length=64, blank=True, default='')
    game_creation = models.BigIntegerField(default=0)  # Epoch milliseconds
    game_duration = models.IntegerField(default=0)  # Seconds
    game_version = models.CharField(max_length=64, blank=True, default='')
    queue_id = models.IntegerField(default=0)


class MatchParticipant(models.Model):
    """One player's post-game stats in a match"""
    match = models.ForeignKey(
        'Match',
        related_name='participants',
        on_delete=models.CASCADE
    )
    summoner = models.ForeignKey(
        'Summoner',
        related_name='participations',
        on_delete=models.SET_NULL,
        null=True
    )
    champion_id = models.IntegerField(default=0)
    champion_name = models.CharField(max_length=64, blank=True, default='')
    team_id = models.IntegerField()
    team_position = models.CharField(max_length=16, blank=True, default='')
    team_participant_id = models.CharField(max_length=64, null=True)
    win = models.BooleanField(default=False)
    kills = models.IntegerField(default=0)
    deaths = models.IntegerField(default=0)
    assists = models.IntegerField(default=0)
    total_damage_dealt_to_champions = models.IntegerField(default=0)
    total_damage_taken = models.IntegerField(default=0)
    total_heal = models.IntegerField(default=0)
    gold_earned = models.IntegerField(default=0)
    total_minions_killed = models.IntegerField(default=0)
    neutral_minions_killed = models.IntegerField(default=0)
    vision_score = models.IntegerField(default=0)
    total_time_cc_dealt = models.IntegerField(default=0)
    time_ccing_others = models.IntegerField(default=0)

    class Meta:
        unique_together = tuple(('match', 'summoner'))


class MatchTeam(models.Model):
    """One side of a match; objective counts are null when not reported"""
    match = models.ForeignKey(
        'Match',
        related_name='teams',
        on_delete=models.CASCADE
    )
    team_id = models.IntegerField()
    win = models.BooleanField(default=False)
    champion_kills = models.IntegerField(null=True)
    tower_kills = models.IntegerField(null=True)
    inhibitor_kills = models.IntegerField(null=True)
    baron_kills = models.IntegerField(null=True)
    dragon_kills = models.IntegerField(null=True)

    class Meta:
        unique_together = tuple(('match', 'team_id'))
