"""WSGI entry point for the statusCharts chart service.

Production servers (e.g. `gunicorn statusCharts.wsgi`) import `application`
from this module.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "statusCharts.settings")

application = get_wsgi_application()
