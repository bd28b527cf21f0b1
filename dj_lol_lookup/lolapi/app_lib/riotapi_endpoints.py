"""Centralized location for (Riot-)API endpoints"""
from urllib.parse import quote

ACCOUNT_BY_RIOT_ID = lambda cluster_host, game_name, tag_line, api_key: (
    "https://{}/riot/account/v1/accounts/by-riot-id/{}/{}?api_key={}".format(
        cluster_host,
        quote(game_name, safe=''),
        quote(tag_line, safe=''),
        api_key)
)
SUMMONER_BY_PUUID = lambda api_host, puuid, api_key: (
    "https://{}/lol/summoner/v4/summoners/by-puuid/{}?api_key={}".format(
        api_host,
        puuid,
        api_key)
)
MATCH_IDS_BY_PUUID = lambda cluster_host, puuid, count, api_key: (
    "https://{}/lol/match/v5/matches/by-puuid/{}/ids?start=0&count={}&api_key={}".format(
        cluster_host,
        puuid,
        count,
        api_key)
)
MATCH_BY_MATCH_ID = lambda cluster_host, match_id, api_key: (
    "https://{}/lol/match/v5/matches/{}?api_key={}".format(
        cluster_host,
        match_id,
        api_key)
)
