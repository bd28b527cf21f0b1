from django.http import HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from django.conf import settings

import json
from lolapi.app_lib.riot_api import riotapi_from_settings
from lolapi.app_lib import lookup


def json_response(payload, status=200):
    return HttpResponse(json.dumps(payload), content_type='application/json', status=status)


def error_response(message, status):
    return json_response({'error': message}, status=status)


@require_http_methods(['GET'])
def account(request):
    """Returns {summoner, account} for a riot id on a region. As JSON object."""
    riot_id_game_name = request.GET.get('riotIdGameName', '').strip()
    tagline = request.GET.get('tagline', '').strip()
    region = request.GET.get('region', '').strip()
    if not riot_id_game_name or not tagline or not region:
        return error_response('Summoner name and tagline and region are required', 400)

    result = lookup.lookup_account(riotapi_from_settings, riot_id_game_name, tagline, region)
    if result.is_error:
        return json_response(result.as_dict(), status=result.status)
    return json_response(result.value)


@require_http_methods(['GET'])
def matches(request):
    """Returns {matches: [..]}, the (up to 10) most recent matches of an already looked up player"""
    puuid = request.GET.get('puuid', '').strip()
    region = request.GET.get('region', '').strip()
    if not puuid or not region:
        return error_response('PUUID and region are required', 400)

    result = lookup.lookup_matches(riotapi_from_settings, puuid, region)
    if result.is_error:
        return json_response(result.as_dict(), status=result.status)
    return json_response({'matches': result.value})


@require_http_methods(['GET'])
def stats(request, player_id):
    """Returns win rate, averages and top champions over the player's stored matches"""
    result = lookup.lookup_player_stats(player_id)
    if result.is_error:
        return json_response(result.as_dict(), status=result.status)
    return json_response(result.value)


def champions_error(result):
    return json_response(dict(success=False, **result.as_dict()), status=result.status)


@csrf_exempt
@require_http_methods(['GET', 'POST'])
def champions(request):
    """
        GET: the champion catalog, loaded from DataDragon when empty or when ?forceUpdate=true
        POST {"championId": n}: one cached champion
    """
    if request.method == 'POST':
        try:
            body = json.loads(request.body or b'{}')
        except ValueError:
            return json_response({'success': False, 'error': 'Request body must be JSON'}, status=400)
        champion_id = body.get('championId') if isinstance(body, dict) else None
        if not champion_id:
            return json_response({'success': False, 'error': 'Champion ID is required'}, status=400)
        try:
            champion_id = int(champion_id)
        except (TypeError, ValueError):
            return json_response({'success': False, 'error': 'Champion ID must be a number'}, status=400)

        result = lookup.get_champion(champion_id)
        if result.is_error:
            return champions_error(result)
        return json_response({'success': True, 'champion': result.value})

    result = lookup.load_champion_catalog(force_update=request.GET.get('forceUpdate') == 'true')
    if result.is_error:
        return champions_error(result)
    return json_response(dict(success=True, **result.value))


@require_http_methods(['GET'])
def summoner(request):
    """Returns {data} - the profile of the player configured as MY_PUUID"""
    result = lookup.lookup_default_summoner(riotapi_from_settings, settings.MY_PUUID, settings.LOLAPI_DEFAULT_REGION)
    if result.is_error:
        return json_response(result.as_dict(), status=result.status)
    return json_response({'data': result.value})
