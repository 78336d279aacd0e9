"""
WSGI config for the siteeditor project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "siteeditor.settings")

application = get_wsgi_application()
