from django.conf import settings
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_http_methods

import datetime
import logging
import re
from lolapi.app_lib.riot_api import riotapi_from_settings
from lolapi.app_lib.recent_searches import RecentSearches
from lolapi.app_lib import lookup, scoring
import lolapi.app_lib.datadragon_endpoints as d_endpoints
from lolweb.forms import SearchForm

logger = logging.getLogger(__name__)

TEAM_NAMES = {100: 'Blue', 200: 'Red'}

# (column, header label), in table order
TABLE_COLUMNS = [
    ('riotIdGameName', 'Summoner Name'),
    ('championName', 'Champion'),
    ('kda', 'K/D/A'),
    ('damageDealt', 'Damage Dealt'),
    ('healing', 'Healing'),
    ('damageTaken', 'Damage Taken'),
    ('ccTime', 'CC Received'),
    ('ccingOthers', 'CC Dealt'),
    ('effectiveness', 'Effectiveness'),
]


def results_url(region, name, tagline):
    return reverse('results', args=[region, name, tagline])


def search_or_redirect(request, initial):
    """Shared by both pages: a valid POST is remembered and redirected to its results page"""
    recent_searches = RecentSearches(request.session)
    if request.method == 'POST':
        form = SearchForm(request.POST)
        if form.is_valid():
            name = form.cleaned_data['name']
            recent_searches.add(name)
            return None, redirect(results_url(form.cleaned_data['region'], name, form.cleaned_data['tagline']))
    else:
        form = SearchForm(initial=initial)
    return {'form': form, 'recent_searches': recent_searches.get()}, None


@require_http_methods(['GET', 'POST'])
def home(request):
    context, response = search_or_redirect(request, {'region': settings.LOLAPI_DEFAULT_REGION})
    if response is not None:
        return response
    return render(request, 'lolweb/home.html', context)


def champion_icon(champion_name):
    return d_endpoints.CHAMPION_ICON_BY_NAME(settings.LOLAPI_DDRAGON_ICON_VERSION,
                                             re.sub(r'[^a-zA-Z0-9]', '', champion_name or ''))


def table_headers(sort_column, sort_direction):
    return [{
        'column': column,
        'label': label,
        'active': column == sort_column,
        'direction': sort_direction if column == sort_column else None,
        'next_direction': scoring.next_sort_direction(sort_column, sort_direction, column),
    } for column, label in TABLE_COLUMNS]


def table_rows(participants, region, searched_name, weights):
    best = scoring.best_per_column(participants, weights)
    rows = []
    for p in participants:
        effectiveness = scoring.calculate_effectiveness_score(p, weights)
        rows.append({
            'participant': p,
            'is_searched': scoring.is_same_player(p, searched_name),
            'profile_url': results_url(region, p['riotIdGameName'], region.upper()) if p['riotIdGameName'] else '',
            'champion_icon': champion_icon(p['championName']),
            'effectiveness': effectiveness,
            'best': {column: scoring.is_best(p, column, best, weights) for column in best},
        })
    return rows


def team_panels(match):
    panels = []
    for team_id in (100, 200):
        team = scoring.get_team_stats(match, team_id)
        if team is None:
            continue
        panels.append(dict(team, name=TEAM_NAMES[team_id], parties=scoring.get_party_groups(team['players'])))
    return panels


def match_panels(matches, region, searched_name, sort):
    weights = settings.LOLAPI_EFFECTIVENESS_WEIGHTS
    sort_match, sort_column, sort_direction = sort
    panels = []
    for match in matches:
        participants = match['info']['participants']
        column, direction = None, None
        if match['metadata']['matchId'] == sort_match:
            column, direction = sort_column, sort_direction
            participants = scoring.sort_participants(participants, column, direction, weights)
        panels.append({
            'match_id': match['metadata']['matchId'],
            'game_mode': match['info']['gameMode'],
            'played_at': datetime.datetime.fromtimestamp(match['info']['gameCreation'] / 1000,
                                                         tz=datetime.timezone.utc),
            'teams': team_panels(match),
            'headers': table_headers(column, direction),
            'rows': table_rows(participants, region, searched_name, weights),
        })
    return panels


def requested_sort(request):
    column = request.GET.get('sort')
    direction = request.GET.get('dir')
    if column not in scoring.SORT_COLUMNS or direction not in ('asc', 'desc'):
        return None, None, None
    return request.GET.get('match'), column, direction


@require_http_methods(['GET', 'POST'])
def results(request, region, riot_id_game_name, tagline):
    context, response = search_or_redirect(request, {'region': region, 'name': riot_id_game_name, 'tagline': tagline})
    if response is not None:
        return response
    context.update({'region': region, 'riot_id_game_name': riot_id_game_name, 'tagline': tagline})

    account_result = lookup.lookup_account(riotapi_from_settings, riot_id_game_name, tagline, region)
    if account_result.is_error:
        return render(request, 'lolweb/results.html', dict(context, error=account_result.message))

    summoner = account_result.value['summoner']
    matches_result = lookup.lookup_matches(riotapi_from_settings, summoner['puuid'], region)
    if matches_result.is_error:
        return render(request, 'lolweb/results.html', dict(context, error=matches_result.message))

    matches = matches_result.value
    context.update({
        'summoner': summoner,
        'win_stats': scoring.calculate_win_stats(matches, riot_id_game_name) if matches else None,
        'matches': match_panels(matches, region, riot_id_game_name, requested_sort(request)),
    })
    return render(request, 'lolweb/results.html', context)
