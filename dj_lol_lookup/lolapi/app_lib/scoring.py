"""
    Derived numbers over formatted matches (see match_formatter): effectiveness score, best-in-column,
    win/loss tally, team panels, party groups and participant ordering.
    Everything here is pure; participants are the camelCase dicts of a formatted match.
"""
import math

# KDA part, damage part, healing part
EFFECTIVENESS_WEIGHTS = (0.4, 0.4, 0.2)


def round_half_up(value, digits):
    """Same as the browser's Math.round(x * 10**digits) / 10**digits: halves go towards +infinity (-0.75 => -0.7)"""
    scale = 10 ** digits
    rounded = math.floor(value * scale + 0.5)
    return rounded if digits == 0 else rounded / scale


def _stat(participant, name):
    return participant.get(name) or 0


def kda_ratio(participant):
    return (_stat(participant, 'kills') + _stat(participant, 'assists')) / max(1, _stat(participant, 'deaths'))


def calculate_effectiveness_score(participant, weights=EFFECTIVENESS_WEIGHTS):
    kda_weight, damage_weight, healing_weight = weights
    kills = _stat(participant, 'kills')
    assists = _stat(participant, 'assists')
    deaths = _stat(participant, 'deaths')

    kda_score = kills * 3 + assists - deaths * 2
    damage_score = _stat(participant, 'totalDamageDealtToChampions') / max(1, _stat(participant, 'totalDamageTaken')) * 100
    healing_score = _stat(participant, 'totalHeal') / 100

    return round_half_up(kda_score * kda_weight + damage_score * damage_weight + healing_score * healing_weight, 1)


COLUMN_VALUES = {
    'kda': kda_ratio,
    'damageDealt': lambda p: _stat(p, 'totalDamageDealtToChampions'),
    'healing': lambda p: _stat(p, 'totalHeal'),
    'damageTaken': lambda p: _stat(p, 'totalDamageTaken'),
    'ccTime': lambda p: _stat(p, 'totalTimeCCDealt'),
    'ccingOthers': lambda p: _stat(p, 'timeCCingOthers'),
    'effectiveness': calculate_effectiveness_score,
}


def column_value(participant, column, weights=EFFECTIVENESS_WEIGHTS):
    if column == 'effectiveness':
        return calculate_effectiveness_score(participant, weights)
    return COLUMN_VALUES[column](participant)


def best_in_column(participants, column, weights=EFFECTIVENESS_WEIGHTS):
    if column not in COLUMN_VALUES or not participants:
        return None
    return max(column_value(p, column, weights) for p in participants)


def best_per_column(participants, weights=EFFECTIVENESS_WEIGHTS):
    return {column: best_in_column(participants, column, weights) for column in COLUMN_VALUES}


def is_best(participant, column, best, weights=EFFECTIVENESS_WEIGHTS):
    """best is best_per_column(...) of the participant's match; equality, so every tied participant is highlighted"""
    return best.get(column) is not None and column_value(participant, column, weights) == best[column]


def is_same_player(participant, player_name):
    return (participant.get('riotIdGameName') or '').lower() == (player_name or '').lower()


def calculate_win_stats(matches, player_name):
    total_games = len(matches)
    wins = 0
    for match in matches:
        player = next((p for p in match['info']['participants'] if is_same_player(p, player_name)), None)
        if player is not None and player.get('win'):
            wins += 1
    return {
        'wins': wins,
        'losses': total_games - wins,
        'winRate': round_half_up(wins / total_games * 100, 2) if total_games > 0 else 0,
    }


def get_team_stats(match, team_id):
    team = next((t for t in match['info']['teams'] if t['teamId'] == team_id), None)
    if team is None:
        return None
    return {
        'teamId': team_id,
        'players': [p for p in match['info']['participants'] if p['teamId'] == team_id],
        'objectives': team['objectives'],
        'won': team['win'],
    }


def get_party_groups(participants):
    """Players sharing a teamParticipantId, only groups of two or more"""
    parties = {}
    for participant in participants:
        party_id = participant.get('teamParticipantId')
        if party_id:
            parties.setdefault(party_id, []).append(participant)
    return [party for party in parties.values() if len(party) > 1]


# Column => (sort key, direction of the first click)
SORT_COLUMNS = {
    'riotIdGameName': (lambda p: (p.get('riotIdGameName') or '').casefold(), 'asc'),
    'championName': (lambda p: (p.get('championName') or '').casefold(), 'asc'),
    'kda': (lambda p: _stat(p, 'kills') + _stat(p, 'assists') - _stat(p, 'deaths'), 'desc'),
    'damageDealt': (COLUMN_VALUES['damageDealt'], 'desc'),
    'healing': (COLUMN_VALUES['healing'], 'desc'),
    'damageTaken': (COLUMN_VALUES['damageTaken'], 'desc'),
    'ccTime': (COLUMN_VALUES['ccTime'], 'desc'),
    'ccingOthers': (COLUMN_VALUES['ccingOthers'], 'desc'),
    'effectiveness': (calculate_effectiveness_score, 'desc'),
}


def next_sort_direction(current_column, current_direction, column):
    if column not in SORT_COLUMNS:
        raise ValueError('Unsortable column {}'.format(column))
    if current_column == column:
        return 'desc' if current_direction == 'asc' else 'asc'
    return SORT_COLUMNS[column][1]


def sort_participants(participants, column, direction, weights=EFFECTIVENESS_WEIGHTS):
    if column not in SORT_COLUMNS:
        raise ValueError('Unsortable column {}'.format(column))
    if column == 'effectiveness':
        sort_key = lambda p: calculate_effectiveness_score(p, weights)
    else:
        sort_key = SORT_COLUMNS[column][0]
    return sorted(participants, key=sort_key, reverse=(direction == 'desc'))
