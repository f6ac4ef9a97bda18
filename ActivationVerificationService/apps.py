"""
App configuration for Activation Verification Service.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

SKIP_SETUP_COMMANDS = ["migrate", "makemigrations", "collectstatic", "shell", "test", "check"]


class ActivationVerificationServiceConfig(AppConfig):
    """App configuration for ActivationVerificationService."""

    name = "ActivationVerificationService"
    verbose_name = "Activation Verification Service"

    def ready(self):
        """Called when Django starts."""
        if len(sys.argv) > 1 and sys.argv[1] in SKIP_SETUP_COMMANDS:
            return

        # Django's autoreloader runs the project twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        if os.environ.get("OTEL_ENABLED", "false").lower() != "true":
            logger.debug("OpenTelemetry disabled (set OTEL_ENABLED=true to enable)")
            return

        if not getattr(self, "_initialized", False):
            from core.instrumentation import setup_opentelemetry

            logger.info("Setting up observability...")
            setup_opentelemetry()
            self._initialized = True
            logger.info("Observability setup complete")
