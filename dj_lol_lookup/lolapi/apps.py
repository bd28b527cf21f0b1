from django.apps import AppConfig


class LolapiConfig(AppConfig):
    name = 'lolapi'
    verbose_name = 'Riot API data'
