from django.urls import path

from server.apps.authentication import views

app_name = 'authentication'

urlpatterns = [
    path('connect', views.connect, name='connect'),
    path('disconnect', views.disconnect, name='disconnect'),
]
