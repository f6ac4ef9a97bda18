"""
WSGI config for ActivationVerificationService project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ActivationVerificationService.settings.prod")

application = get_wsgi_application()
