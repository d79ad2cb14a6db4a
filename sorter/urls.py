from django.urls import path
from . import views

app_name = 'sorter'

urlpatterns = [
    path('', views.index, name='index'),
    path('privacy/', views.privacy, name='privacy'),

    # API endpoint returning the sorted sequence as JSON
    path('api/sort/', views.api_sort, name='api_sort'),
]
