"""Django settings for dj_lol_lookup; everything deployment specific comes from the environment"""
from datetime import timedelta
import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'dev-only-insecure-key')
DEBUG = os.environ.get('DJANGO_DEBUG', 'false').strip().lower() == 'true'
ALLOWED_HOSTS = [h.strip() for h in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()]

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.staticfiles',
    'django.contrib.humanize',
    'lolapi',
    'lolweb',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'dj_lol_lookup.urls'
WSGI_APPLICATION = 'dj_lol_lookup.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

# PostgreSQL when configured (same variables the database dump tooling uses), SQLite otherwise
if os.environ.get('DJ_PG_DBNAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ['DJ_PG_DBNAME'],
            'USER': os.environ.get('DJ_PG_USERNAME', ''),
            'PASSWORD': os.environ.get('DJ_PG_PASSWORD', ''),
            'HOST': os.environ.get('DJ_PG_HOST', 'localhost'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(BASE_DIR, 'db.sqlite3'),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

STATIC_URL = '/static/'
MEDIA_URL = '/media/'
MEDIA_ROOT = os.path.join(BASE_DIR, 'media')

# Riot API
RIOT_API_KEY = os.environ.get('RIOT_API_KEY', '').strip()
MY_PUUID = os.environ.get('MY_PUUID', '').strip()

# Lookup behaviour
LOLAPI_PROFILE_FRESHNESS = timedelta(hours=24)
LOLAPI_MATCHES_FRESHNESS = timedelta(hours=1)
LOLAPI_MATCH_BATCH_SIZE = 10
LOLAPI_EFFECTIVENESS_WEIGHTS = (0.4, 0.4, 0.2)  # KDA, damage ratio, healing
LOLAPI_DEFAULT_REGION = 'na1'
LOLAPI_CHAMPION_IMAGE_DIR = os.path.join(MEDIA_ROOT, 'champions')
LOLAPI_CHAMPION_IMAGE_URL = MEDIA_URL + 'champions/'
LOLAPI_DDRAGON_ICON_VERSION = os.environ.get('LOLAPI_DDRAGON_ICON_VERSION', '14.1.1')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '[{asctime}][{levelname}][{name}] {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'plain',
        },
    },
    'loggers': {
        'lolapi': {
            'handlers': ['console'],
            'level': os.environ.get('LOLAPI_LOG_LEVEL', 'INFO'),
        },
        'lolweb': {
            'handlers': ['console'],
            'level': os.environ.get('LOLAPI_LOG_LEVEL', 'INFO'),
        },
    },
}
