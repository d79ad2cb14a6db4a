"""ASGI config for the quicksort project."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'quicksort.settings')

application = get_asgi_application()
