#!/usr/bin/env python
import os
import sys

import django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'dj_lol_lookup.settings')
django.setup()
from lolapi.app_lib.lookup import load_champion_catalog


def main():
    # Always reload, so a new game version replaces the cached catalog and images
    result = load_champion_catalog(force_update=True)
    if result.is_error:
        print('{} ({}). . . Exiting.'.format(result.message, result.details))
        sys.exit(1)
    print('{} (version {})'.format(result.value['message'], result.value['version']))


if __name__ == "__main__":
    main()
