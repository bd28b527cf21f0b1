from django.urls import path
from .views import api


# /api/lol
urlpatterns = [
    path('account', api.account, name='api-account'),
    path('matches', api.matches, name='api-matches'),
    path('stats/<str:player_id>', api.stats, name='api-stats'),
    path('champions', api.champions, name='api-champions'),
    path('summoner', api.summoner, name='api-summoner'),
]
