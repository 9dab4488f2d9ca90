from django.urls import path

from server.apps.files import views

app_name = 'files'

urlpatterns = [
    path('files', views.NodeCollectionView.as_view(), name='collection'),
    path('files/<int:node_id>', views.node_detail, name='detail'),
    path('files/<int:node_id>/publish', views.node_publish, name='publish'),
    path(
        'files/<int:node_id>/unpublish',
        views.node_unpublish,
        name='unpublish',
    ),
    path('files/<int:node_id>/data', views.node_data, name='data'),
]
