from django.urls import path
from .views import pages


urlpatterns = [
    path('', pages.home, name='home'),
    path('lol/<str:region>/<str:riot_id_game_name>/<str:tagline>', pages.results, name='results'),
]
