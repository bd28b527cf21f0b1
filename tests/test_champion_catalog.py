from unittest import mock

import pytest

from lolapi.app_lib import champion_catalog
from lolapi.app_lib import datadragon_endpoints as d_endpoints
from lolapi.models import Champion
from conftest import FakeResponse

pytestmark = pytest.mark.django_db


def api_champions(count):
    return {'data': {
        'Champ{}'.format(i): {'id': 'Champ{}'.format(i), 'key': str(i + 1), 'name': 'Champ {:02d}'.format(i),
                              'title': 'the Test', 'image': {'full': 'Champ{}.png'.format(i)}}
        for i in range(count)
    }}


@pytest.fixture
def data_dragon(settings, tmp_path):
    settings.LOLAPI_CHAMPION_IMAGE_DIR = str(tmp_path)
    catalog = {}

    def fake_get(url):
        if url == d_endpoints.VERSIONS:
            return FakeResponse(['14.2.1'])
        if url == d_endpoints.CHAMPIONS_LIST('14.2.1'):
            return FakeResponse(catalog)
        return FakeResponse(content=b'image')

    with mock.patch('lolapi.app_lib.champion_catalog.requests.get', side_effect=fake_get):
        yield catalog


def test_pause_between_batches_only(data_dragon):
    data_dragon.update(api_champions(25))

    with mock.patch('lolapi.app_lib.champion_catalog.time.sleep') as sleep:
        version, processed = champion_catalog.refresh_champion_catalog()

    assert version == '14.2.1'
    assert len(processed) == 25
    assert sleep.call_args_list == [mock.call(0.1), mock.call(0.1)]
    assert Champion.objects.count() == 25


def test_single_batch_does_not_pause(data_dragon):
    data_dragon.update(api_champions(10))

    with mock.patch('lolapi.app_lib.champion_catalog.time.sleep') as sleep:
        champion_catalog.refresh_champion_catalog()

    sleep.assert_not_called()


def test_champion_with_bad_key_is_skipped(data_dragon):
    data_dragon.update(api_champions(3))
    data_dragon['data']['Champ1']['key'] = 'not-a-number'

    with mock.patch('lolapi.app_lib.champion_catalog.time.sleep'):
        version, processed = champion_catalog.refresh_champion_catalog()

    assert sorted(c.id for c in processed) == [1, 3]
