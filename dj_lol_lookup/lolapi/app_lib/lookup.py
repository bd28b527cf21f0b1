"""
    Cache-or-fetch operations behind the HTTP routes. Each returns Ok(value) or Err(kind, message);
    provider, network and database failures are caught here and become Err(UPSTREAM, ...).
"""
from lolapi.app_lib.exceptions import RiotApiError, ConfigurationError
from lolapi.app_lib.results import Ok, Err
from lolapi.app_lib.riot_api import fetch_match_payloads
from lolapi.app_lib.match_formatter import format_matches
from lolapi.app_lib import champion_catalog
from lolapi.app_lib import storage
from django.conf import settings
from django.db import DatabaseError
import logging
import requests

logger = logging.getLogger(__name__)

UPSTREAM_ERRORS = (RiotApiError, ConfigurationError, requests.RequestException, ValueError, DatabaseError)


def account_as_dict(summoner):
    return {'puuid': summoner.puuid, 'gameName': summoner.game_name, 'tagLine': summoner.tag_line}


def summoner_as_dict(summoner):
    return {
        'id': summoner.summoner_id,
        'puuid': summoner.puuid,
        'profileIconId': summoner.profile_icon_id,
        'summonerLevel': summoner.summoner_level,
        'revisionDate': summoner.revision_date,
    }


def lookup_account(riotapi_factory, game_name, tag_line, region):
    """riotapi_factory is only called on a cache miss, so cached lookups work without an API key"""
    try:
        cached = storage.find_player_by_identity(game_name, tag_line, region)
        if cached is not None and storage.is_fresh(cached.profile_updated_at, settings.LOLAPI_PROFILE_FRESHNESS):
            logger.info("Profile of %s#%s (%s) served from cache", game_name, tag_line, region)
            return Ok({'account': account_as_dict(cached), 'summoner': summoner_as_dict(cached)})

        riotapi = riotapi_factory()
        api_account_dict = riotapi.get_account_by_riot_id(region, game_name, tag_line).json()
        api_summoner_dict = riotapi.get_summoner_by_puuid(region, api_account_dict['puuid']).json()
        summoner = storage.upsert_player(api_account_dict, api_summoner_dict, region)
        logger.info("Profile of %s#%s (%s) fetched and stored", game_name, tag_line, region)
        return Ok({'account': account_as_dict(summoner), 'summoner': summoner_as_dict(summoner)})
    except (KeyError,) + UPSTREAM_ERRORS as e:
        logger.error("Failed to fetch account data for %s#%s (%s): %s", game_name, tag_line, region, e)
        return Err(Err.UPSTREAM, 'Failed to fetch account data')


def refresh_matches(riotapi, summoner, region):
    """Fetch the latest match ids and store each match in its own transaction; failed matches are dropped"""
    match_ids = riotapi.get_match_ids(region, summoner.puuid, count=settings.LOLAPI_MATCH_BATCH_SIZE).json()
    stored = 0
    for payload in fetch_match_payloads(riotapi, region, match_ids):
        try:
            storage.upsert_match(payload, region)
            stored += 1
        except (KeyError, DatabaseError) as e:
            logger.warning("Dropping match %s, could not store it: %s",
                           (payload.get('metadata') or {}).get('matchId'), e)
    storage.mark_matches_updated(summoner)
    logger.info("Stored %s of %s matches for %s", stored, len(match_ids), summoner.puuid)


def lookup_matches(riotapi_factory, puuid, region):
    try:
        summoner = storage.find_player_by_puuid(puuid)
        if summoner is None:
            return Err(Err.NOT_FOUND, 'Summoner not found, look up the account first')

        limit = settings.LOLAPI_MATCH_BATCH_SIZE
        if storage.is_fresh(summoner.matches_updated_at, settings.LOLAPI_MATCHES_FRESHNESS):
            cached = storage.find_cached_matches(puuid, limit)
            if cached:
                logger.info("Matches of %s served from cache", puuid)
                return Ok(format_matches(cached))

        refresh_matches(riotapi_factory(), summoner, region)
        return Ok(format_matches(storage.find_cached_matches(puuid, limit)))
    except UPSTREAM_ERRORS as e:
        logger.error("Failed to fetch match history for %s: %s", puuid, e)
        return Err(Err.UPSTREAM, 'Failed to fetch match history')


def lookup_player_stats(puuid):
    try:
        return Ok(storage.summarize_player_stats(puuid))
    except DatabaseError as e:
        logger.error("Error fetching stats for %s: %s", puuid, e)
        return Err(Err.UPSTREAM, 'Failed to fetch statistics')


def lookup_default_summoner(riotapi_factory, puuid, region):
    if not puuid:
        return Err(Err.UPSTREAM, 'Server is not configured with a default player (MY_PUUID)')
    try:
        return Ok(riotapi_factory().get_summoner_by_puuid(region, puuid).json())
    except UPSTREAM_ERRORS as e:
        logger.error("Failed to fetch default summoner: %s", e)
        return Err(Err.UPSTREAM, 'Failed to fetch summoner data')


def load_champion_catalog(force_update=False):
    try:
        cached = champion_catalog.cached_champions()
        if cached and not force_update:
            return Ok({
                'champions': [champion_catalog.champion_as_dict(c) for c in cached],
                'message': 'Champions loaded from database',
            })
        version, processed = champion_catalog.refresh_champion_catalog()
        return Ok({
            'champions': [champion_catalog.champion_as_dict(c) for c in processed],
            'message': 'Successfully updated {} champions'.format(len(processed)),
            'version': version,
        })
    except (KeyError, IndexError) + UPSTREAM_ERRORS as e:
        logger.error("Error loading champion catalog: %s", e)
        return Err(Err.UPSTREAM, 'Failed to fetch or update champion data', details=str(e))


def get_champion(champion_id):
    try:
        champion = champion_catalog.champions.find(id=champion_id)
    except (ValueError, DatabaseError) as e:
        logger.error("Error fetching champion %s: %s", champion_id, e)
        return Err(Err.UPSTREAM, 'Failed to fetch champion data', details=str(e))
    if champion is None:
        return Err(Err.NOT_FOUND, 'Champion not found')
    return Ok(champion_catalog.champion_as_dict(champion))
