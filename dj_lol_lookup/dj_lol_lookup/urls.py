from django.conf import settings
from django.conf.urls.static import static
from django.urls import include, path

urlpatterns = [
    path('api/lol/', include('lolweb.api_urls')),
    path('', include('lolweb.urls')),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
