"""
Django management command to verify a license activation from the shell.

Runs the same verification as the activation verify endpoint and prints
the JSON body the endpoint would return.
"""

import asyncio
import json

from django.core.management.base import BaseCommand

from activations.application.handlers.verify_activation_handler import VerifyActivationHandler
from activations.application.queries.verify_activation import VerifyActivationQuery
from activations.infrastructure.registry_client import LicenseRegistryClient
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository


class Command(BaseCommand):
    """Command to verify a serial number and activation token."""

    help = "Verify that a serial number and activation token are valid and registered"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("serial", help="License serial number")
        parser.add_argument("token", help="Activation token (40 hex characters)")

    def handle(self, *args, **options):
        """Execute the command."""
        handler = VerifyActivationHandler(
            license_repository=DjangoLicenseRepository(),
            token_verification_client=LicenseRegistryClient(),
        )
        query = VerifyActivationQuery(serial=options["serial"], token=options["token"])

        outcome = asyncio.run(handler.handle(query))
        response = outcome.to_response()

        self.stdout.write(json.dumps({"message": response.message, "response": response.response}))
        if outcome.success:
            # pylint: disable=no-member
            self.stderr.write(self.style.SUCCESS("Activation verified"))
        else:
            self.stderr.write(self.style.WARNING(f"Verification failed: {outcome.code}"))
