from unittest import mock

import pytest
import requests

from lolapi.app_lib import riotapi_endpoints
from lolapi.app_lib.exceptions import RiotApiError, RateLimitedError, ConfigurationError
from lolapi.app_lib.regional_riotapi_hosts import RegionalRiotapiHosts
from lolapi.app_lib.riot_api import RiotApi, fetch_match_payloads, request_and_return_match_or_none
from conftest import FakeResponse


@pytest.fixture
def riotapi():
    return RiotApi('RGAPI-test', RegionalRiotapiHosts(), riotapi_endpoints)


@pytest.fixture
def requests_get():
    with mock.patch('lolapi.app_lib.riot_api.requests.get') as get:
        get.return_value = FakeResponse({'ok': True})
        yield get


def test_missing_api_key_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        RiotApi('', RegionalRiotapiHosts(), riotapi_endpoints)


def test_account_lookup_goes_to_the_routing_cluster(riotapi, requests_get):
    response = riotapi.get_account_by_riot_id('kr', 'Hide on bush', 'KR1')

    assert response.json() == {'ok': True}
    requests_get.assert_called_once_with(
        'https://asia.api.riotgames.com/riot/account/v1/accounts/by-riot-id/Hide%20on%20bush/KR1?api_key=RGAPI-test')


def test_summoner_lookup_goes_to_the_platform_host(riotapi, requests_get):
    riotapi.get_summoner_by_puuid('euw1', 'abc')

    requests_get.assert_called_once_with(
        'https://euw1.api.riotgames.com/lol/summoner/v4/summoners/by-puuid/abc?api_key=RGAPI-test')


def test_match_ids_and_match(riotapi, requests_get):
    riotapi.get_match_ids('na1', 'abc', count=10)
    riotapi.get_match('na1', 'NA1_1')

    assert requests_get.call_args_list == [
        mock.call('https://americas.api.riotgames.com/lol/match/v5/matches/by-puuid/abc/ids'
                  '?start=0&count=10&api_key=RGAPI-test'),
        mock.call('https://americas.api.riotgames.com/lol/match/v5/matches/NA1_1?api_key=RGAPI-test'),
    ]


def test_rate_limit_is_its_own_error(riotapi, requests_get):
    requests_get.return_value = FakeResponse(status_code=429, headers={'Retry-After': '3'})

    with pytest.raises(RateLimitedError) as excinfo:
        riotapi.get_match('na1', 'NA1_1')
    assert excinfo.value.message == 'HTTP Error 429'


def test_non_200_raises_with_status(riotapi, requests_get):
    requests_get.return_value = FakeResponse(status_code=404)

    with pytest.raises(RiotApiError) as excinfo:
        riotapi.get_summoner_by_puuid('na1', 'abc')
    assert not isinstance(excinfo.value, RateLimitedError)
    assert excinfo.value.response.status_code == 404


@pytest.mark.parametrize('game_name, tag_line', [('', 'NA1'), ('Faker', ''), ('   ', 'NA1'), (None, 'NA1')])
def test_empty_inputs_are_rejected_before_any_request(riotapi, requests_get, game_name, tag_line):
    with pytest.raises(ValueError):
        riotapi.get_account_by_riot_id('na1', game_name, tag_line)
    requests_get.assert_not_called()


def test_failed_match_becomes_none():
    riotapi = mock.Mock()
    riotapi.get_match.side_effect = requests.ConnectionError('down')

    assert request_and_return_match_or_none(riotapi, 'na1', 'NA1_1') is None


def test_fetch_match_payloads_drops_failures_and_keeps_order():
    def get_match(region_name, match_id):
        if match_id == 'NA1_2':
            raise RateLimitedError(FakeResponse(status_code=429))
        return FakeResponse({'id': match_id})

    riotapi = mock.Mock()
    riotapi.get_match.side_effect = get_match

    payloads = fetch_match_payloads(riotapi, 'na1', ['NA1_1', 'NA1_2', 'NA1_3'])

    assert payloads == [{'id': 'NA1_1'}, {'id': 'NA1_3'}]
    assert riotapi.get_match.call_count == 3


def test_fetch_match_payloads_of_nothing():
    riotapi = mock.Mock()

    assert fetch_match_payloads(riotapi, 'na1', []) == []
    riotapi.get_match.assert_not_called()
