import pytest

from lolapi.app_lib.exceptions import RiotApiError, RateLimitedError


class FakeResponse:
    def __init__(self, payload=None, status_code=200, headers=None, content=b''):
        self.payload = payload
        self.status_code = status_code
        self.headers = headers or {}
        self.content = content

    def json(self):
        return self.payload


class FakeRiotApi:
    """Stands in for RiotApi; match ids listed in `failing` answer 429 like a rate-limited provider"""

    def __init__(self, accounts=None, summoners=None, match_ids=None, matches=None, failing=()):
        self.accounts = accounts or {}
        self.summoners = summoners or {}
        self.match_ids = match_ids or {}
        self.matches = matches or {}
        self.failing = set(failing)
        self.calls = []

    def get_account_by_riot_id(self, region_name, game_name, tag_line):
        self.calls.append(('account', game_name, tag_line))
        if (game_name, tag_line) not in self.accounts:
            raise RiotApiError(FakeResponse(status_code=404))
        return FakeResponse(self.accounts[(game_name, tag_line)])

    def get_summoner_by_puuid(self, region_name, puuid):
        self.calls.append(('summoner', puuid))
        if puuid not in self.summoners:
            raise RiotApiError(FakeResponse(status_code=404))
        return FakeResponse(self.summoners[puuid])

    def get_match_ids(self, region_name, puuid, count=10):
        self.calls.append(('match_ids', puuid, count))
        return FakeResponse(self.match_ids.get(puuid, [])[:count])

    def get_match(self, region_name, match_id):
        self.calls.append(('match', match_id))
        if match_id in self.failing:
            raise RateLimitedError(FakeResponse(status_code=429, headers={'Retry-After': '1'}))
        return FakeResponse(self.matches[match_id])


def make_participant(puuid, name, team_id=100, win=True, **stats):
    participant = {
        'puuid': puuid,
        'riotIdGameName': name,
        'riotIdTagline': 'NA1',
        'teamId': team_id,
        'win': win,
        'championId': 1,
        'championName': 'Annie',
        'kills': 0,
        'deaths': 0,
        'assists': 0,
        'totalDamageDealtToChampions': 0,
        'totalDamageTaken': 0,
        'totalHeal': 0,
        'goldEarned': 0,
        'totalMinionsKilled': 0,
        'visionScore': 0,
        'totalTimeCCDealt': 0,
        'timeCCingOthers': 0,
    }
    participant.update(stats)
    return participant


def make_match_payload(match_id, participants, game_creation=1700000000000, blue_win=True, objectives=True):
    teams = []
    for team_id, win in ((100, blue_win), (200, not blue_win)):
        team = {'teamId': team_id, 'win': win}
        if objectives:
            team['objectives'] = {
                'champion': {'first': False, 'kills': 20 if win else 10},
                'tower': {'first': False, 'kills': 9 if win else 3},
                'inhibitor': {'first': False, 'kills': 2 if win else 0},
                'baron': {'first': False, 'kills': 1 if win else 0},
                'dragon': {'first': False, 'kills': 3 if win else 1},
            }
        teams.append(team)
    return {
        'metadata': {
            'dataVersion': '2',
            'matchId': match_id,
            'participants': [p['puuid'] for p in participants],
        },
        'info': {
            'gameCreation': game_creation,
            'gameDuration': 1800,
            'gameMode': 'CLASSIC',
            'gameType': 'MATCHED_GAME',
            'gameVersion': '14.1.556.5678',
            'platformId': 'NA1',
            'queueId': 420,
            'participants': participants,
            'teams': teams,
        },
    }


def default_participants():
    return [
        make_participant('puuid-faker', 'Faker', 100, True, kills=5, deaths=2, assists=3,
                         totalDamageDealtToChampions=20000, totalDamageTaken=10000, totalHeal=500,
                         championName='Ahri', teamParticipantId='party-1'),
        make_participant('puuid-keria', 'Keria', 100, True, kills=1, deaths=1, assists=12,
                         totalDamageDealtToChampions=8000, totalDamageTaken=9000, totalHeal=4000,
                         championName='Lulu', teamParticipantId='party-1'),
        make_participant('puuid-chovy', 'Chovy', 200, False, kills=4, deaths=5, assists=2,
                         totalDamageDealtToChampions=22000, totalDamageTaken=15000, totalHeal=300,
                         championName="Kai'Sa"),
        make_participant('puuid-peanut', 'Peanut', 200, False, kills=2, deaths=6, assists=4,
                         totalDamageDealtToChampions=9000, totalDamageTaken=25000, totalHeal=6000,
                         championName='Lee Sin'),
    ]


@pytest.fixture
def participants():
    return default_participants()


@pytest.fixture
def match_payload(participants):
    return make_match_payload('NA1_1000', participants)


def played_match(match_id, game_creation, blue_win):
    people = [dict(p, win=(p['teamId'] == 100) == blue_win) for p in default_participants()]
    return make_match_payload(match_id, people, game_creation=game_creation, blue_win=blue_win)


@pytest.fixture
def fake_riotapi():
    # Newest first is NA1_1002; blue (Faker's team) wins NA1_1000 and NA1_1002
    payloads = {
        'NA1_{}'.format(1000 + i): played_match('NA1_{}'.format(1000 + i), 1700000000000 + i * 3600000, i % 2 == 0)
        for i in range(3)
    }
    return FakeRiotApi(
        accounts={('Faker', 'NA1'): {'puuid': 'puuid-faker', 'gameName': 'Faker', 'tagLine': 'NA1'}},
        summoners={'puuid-faker': {'id': 'enc-id', 'puuid': 'puuid-faker', 'profileIconId': 6,
                                   'summonerLevel': 512, 'revisionDate': 1700000000000}},
        match_ids={'puuid-faker': ['NA1_1002', 'NA1_1001', 'NA1_1000']},
        matches=payloads,
    )


def unreachable_riotapi():
    raise AssertionError('the provider must not be called')
