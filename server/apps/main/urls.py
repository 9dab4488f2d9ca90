from django.urls import path

from server.apps.main import views

app_name = 'main'

urlpatterns = [
    path('status', views.status, name='status'),
    path('stats', views.stats, name='stats'),
]
