from lolapi.models import Champion
from lolapi.app_lib.repositories import ChampionRepository
from lolapi.app_lib.exceptions import RiotApiError
import lolapi.app_lib.datadragon_endpoints as d_endpoints
from concurrent.futures import ThreadPoolExecutor
from django.conf import settings
from django.db import DatabaseError
import logging
import os
import requests
import time

logger = logging.getLogger(__name__)

champions = ChampionRepository()

BATCH_SIZE = 10
BATCH_PAUSE = 0.1  # Seconds between batches


def request_json(url):
    response = requests.get(url)
    if response.status_code != 200:
        raise RiotApiError(response)
    return response.json()


def get_latest_version():
    return request_json(d_endpoints.VERSIONS)[0]


def download_image(url, filename):
    """Saves the image under LOLAPI_CHAMPION_IMAGE_DIR; returns its public path, or '' if it couldn't be fetched"""
    try:
        response = requests.get(url)
        if response.status_code != 200:
            raise RiotApiError(response)
        os.makedirs(settings.LOLAPI_CHAMPION_IMAGE_DIR, exist_ok=True)
        with open(os.path.join(settings.LOLAPI_CHAMPION_IMAGE_DIR, filename), 'wb') as fh:
            fh.write(response.content)
    except (RiotApiError, requests.RequestException, OSError) as e:
        logger.error("Error downloading image %s: %s", url, e)
        return ''
    return '{}{}'.format(settings.LOLAPI_CHAMPION_IMAGE_URL, filename)


def download_champion_images(version, api_champion_dict):
    key = api_champion_dict['key'].lower()
    thumbnail = download_image(d_endpoints.CHAMPION_THUMBNAIL(version, api_champion_dict['image']['full']),
                               '{}.png'.format(key))
    # Splash arts are named after the string id (e.g. MonkeyKing_0.jpg)
    splash = download_image(d_endpoints.CHAMPION_SPLASH(api_champion_dict['id']),
                            '{}_splash.jpg'.format(key))
    return thumbnail, splash


def cached_champions():
    return list(Champion.objects.order_by('name'))


def refresh_champion_catalog():
    """
        Load every champion of the latest game version from DataDragon, in batches of ten:
        images of a batch are downloaded in parallel, then each champion is saved on its own.
        A champion that fails to save is logged and left out. Returns (version, saved champions).
    """
    version = get_latest_version()
    logger.info("Using Data Dragon version: %s", version)
    api_champions = list(request_json(d_endpoints.CHAMPIONS_LIST(version))['data'].values())
    logger.info("Found %s champions to process", len(api_champions))

    processed = []
    for start in range(0, len(api_champions), BATCH_SIZE):
        if start > 0:
            time.sleep(BATCH_PAUSE)
        batch = api_champions[start:start + BATCH_SIZE]
        with ThreadPoolExecutor(max_workers=len(batch)) as executor:
            images = list(executor.map(lambda c: download_champion_images(version, c), batch))
        for c, (thumbnail, splash) in zip(batch, images):
            try:
                champion = champions.upsert({'id': int(c['key'])}, {
                    'key': c['id'],
                    'name': c['name'],
                    'title': c.get('title') or '',
                    'thumbnail_url': thumbnail,
                    'splash_url': splash,
                    'version': version,
                })
            except (DatabaseError, KeyError, ValueError) as e:
                logger.error("Error processing champion %s: %s", c.get('name'), e)
                continue
            logger.debug("Processed champion: %s", champion.name)
            processed.append(champion)

    logger.info("Successfully processed %s champions", len(processed))
    return version, processed


def champion_as_dict(champion):
    return {
        'id': champion.id,
        'key': champion.key,
        'name': champion.name,
        'title': champion.title,
        'thumbnailUrl': champion.thumbnail_url,
        'splashUrl': champion.splash_url,
        'version': champion.version,
    }
