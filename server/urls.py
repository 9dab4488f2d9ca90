"""Main URL mapping configuration file.

Include other URLConfs from external apps using method `include()`.
"""

from django.urls import include, path

urlpatterns = [
    path('', include('server.apps.main.urls', namespace='main')),
    path('', include('server.apps.authentication.urls', namespace='authentication')),
    path('', include('server.apps.files.urls', namespace='files')),
]
