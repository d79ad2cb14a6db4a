import os

import django


def pytest_configure(config):
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'quicksort.settings')
    django.setup()

    from django.test.utils import setup_test_environment
    setup_test_environment()
