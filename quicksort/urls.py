"""URL configuration for the quicksort project."""

from django.urls import include, path

urlpatterns = [
    path('', include('sorter.urls')),
]
