from .exceptions import RiotApiError, RateLimitedError, ConfigurationError
from .regional_riotapi_hosts import RegionalRiotapiHosts
from . import riotapi_endpoints

from concurrent.futures import ThreadPoolExecutor
import logging
import requests

logger = logging.getLogger(__name__)


def _require(**values):
    for name, value in values.items():
        if not isinstance(value, str) or not value.strip():
            raise ValueError('{} must be a non-empty string'.format(name))


class RiotApi:

    def __init__(self, api_key, api_hosts, regional_endpoints):
        if not api_key:
            raise ConfigurationError('RIOT_API_KEY is not configured')
        self.__api_key = api_key
        self.__api_hosts = api_hosts
        self.__endpoints = regional_endpoints

    def __get(self, url, method):
        logger.debug("[RIOT-API] GET %s", method)
        response = requests.get(url)

        # Check response status
        if response.status_code == 429:
            logger.warning("[RIOT-API] Rate limited on %s (Retry-After: %s)",
                           method, response.headers.get('Retry-After', '?'))
            raise RateLimitedError(response)
        if response.status_code != 200:
            logger.warning("[RIOT-API] HTTP Error %s on %s", response.status_code, method)
            raise RiotApiError(response)

        return response

    def get_account_by_riot_id(self, region_name, game_name, tag_line):
        _require(region=region_name, game_name=game_name, tag_line=tag_line)
        return self.__get(self.__endpoints.ACCOUNT_BY_RIOT_ID(self.__api_hosts.get_cluster_host_by_region(region_name),
                                                              game_name,
                                                              tag_line,
                                                              self.__api_key),
                          '/riot/account/v1/accounts/by-riot-id/{gameName}/{tagLine}')

    def get_summoner_by_puuid(self, region_name, puuid):
        _require(region=region_name, puuid=puuid)
        return self.__get(self.__endpoints.SUMMONER_BY_PUUID(self.__api_hosts.get_host_by_region(region_name),
                                                             puuid,
                                                             self.__api_key),
                          '/lol/summoner/v4/summoners/by-puuid/{puuid}')

    def get_match_ids(self, region_name, puuid, count=10):
        _require(region=region_name, puuid=puuid)
        return self.__get(self.__endpoints.MATCH_IDS_BY_PUUID(self.__api_hosts.get_cluster_host_by_region(region_name),
                                                              puuid,
                                                              count,
                                                              self.__api_key),
                          '/lol/match/v5/matches/by-puuid/{puuid}/ids')

    def get_match(self, region_name, match_id):
        _require(region=region_name, match_id=match_id)
        return self.__get(self.__endpoints.MATCH_BY_MATCH_ID(self.__api_hosts.get_cluster_host_by_region(region_name),
                                                             match_id,
                                                             self.__api_key),
                          '/lol/match/v5/matches/{matchId}')


def riotapi_from_settings():
    from django.conf import settings
    return RiotApi(settings.RIOT_API_KEY, RegionalRiotapiHosts(), riotapi_endpoints)


def request_and_return_match_or_none(riotapi, region_name, match_id):
    """
        If loading a match fails (HTTP error incl. 429, network error, unparseable body):
        - log it and return None; the caller drops it from the batch, there is no retry
    """
    try:
        return riotapi.get_match(region_name, match_id).json()
    except RiotApiError as err:
        logger.warning("Dropping match %s (%s)", match_id, err.message)
    except (requests.RequestException, ValueError) as err:
        logger.warning("Dropping match %s (%s)", match_id, err)
    return None


def fetch_match_payloads(riotapi, region_name, match_ids):
    """Fetch all matches at once; failed ones are left out, order of match_ids is kept"""
    if not match_ids:
        return []
    with ThreadPoolExecutor(max_workers=len(match_ids)) as executor:
        futures = [executor.submit(request_and_return_match_or_none, riotapi, region_name, match_id)
                   for match_id in match_ids]
        payloads = [future.result() for future in futures]
    return [payload for payload in payloads if payload is not None]
