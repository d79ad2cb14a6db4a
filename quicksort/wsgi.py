"""WSGI config for the quicksort project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'quicksort.settings')

application = get_wsgi_application()
