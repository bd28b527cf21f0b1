"""Centralized location for (DataDragon-)API endpoints"""

VERSIONS = 'https://ddragon.leagueoflegends.com/api/versions.json'
CHAMPIONS_LIST = lambda version_id: (
    'https://ddragon.leagueoflegends.com/cdn/{}/data/en_US/champion.json'.format(version_id)
)
CHAMPION_THUMBNAIL = lambda version_id, image_filename: (
    'https://ddragon.leagueoflegends.com/cdn/{}/img/champion/{}'.format(version_id, image_filename)
)
CHAMPION_SPLASH = lambda champion_key: (
    'https://ddragon.leagueoflegends.com/cdn/img/champion/splash/{}_0.jpg'.format(champion_key)
)
CHAMPION_ICON_BY_NAME = lambda version_id, champion_name: (
    'https://ddragon.leagueoflegends.com/cdn/{}/img/champion/{}.png'.format(version_id, champion_name)
)
