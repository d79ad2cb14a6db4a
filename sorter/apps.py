from django.apps import AppConfig


class SorterConfig(AppConfig):
    name = 'sorter'
    verbose_name = 'QuickSort'
