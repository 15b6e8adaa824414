"""
WSGI config for the brandvoice backend.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "brandvoice.settings")

application = get_wsgi_application()
