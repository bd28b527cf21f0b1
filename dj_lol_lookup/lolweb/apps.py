from django.apps import AppConfig


class LolwebConfig(AppConfig):
    name = 'lolweb'
