"""
License verification API views.

These endpoints are used by client software to:
- Verify that a serial number and activation token are genuine and registered

The verification endpoint always answers HTTP 200; failure is reported
only in the body (``"response": "invalid"``).
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.application.handlers.verify_activation_handler import VerifyActivationHandler
from activations.application.queries.verify_activation import VerifyActivationQuery
from activations.infrastructure.registry_client import LicenseRegistryClient
from api.permissions import get_verification_permissions
from api.v1.licenses.serializers import ActivationVerifyResponseSerializer
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

# Initialize repositories (in production, use DI container)
_license_repo = DjangoLicenseRepository()

tracer = get_tracer(__name__)


class ActivationVerifyView(APIView):
    """View for verifying license activations."""

    authentication_classes = []

    def get_permissions(self):
        """Return the configured verification access policy."""
        return get_verification_permissions()

    def get_handler(self) -> VerifyActivationHandler:
        """Build the verification handler for this request."""
        return VerifyActivationHandler(
            license_repository=_license_repo,
            token_verification_client=LicenseRegistryClient(),
        )

    @extend_schema(
        operation_id="activation_verify",
        summary="Verify Activation",
        description=(
            "Verify that a license serial number and activation token are genuine "
            "and currently registered. Always returns 200; check the `response` field "
            "(`Activated` or `invalid`)."
        ),
        tags=["License API"],
        parameters=[
            OpenApiParameter(
                name="serial",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Serial number (XXXXX-XXXXX-XXXXX-XXXXX-XXXXX-XXXXX)",
            ),
            OpenApiParameter(
                name="token",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Activation token (40 hexadecimal characters)",
            ),
        ],
        responses={
            200: ActivationVerifyResponseSerializer,
            403: {"description": "Client not allowed to call this endpoint"},
        },
    )
    def get(self, request: Request) -> Response:
        """Verify a serial number and activation token."""
        return async_to_sync(self._handle_activation_verify)(request)

    async def _handle_activation_verify(self, request: Request) -> Response:
        """Async handler for activation verify."""
        with tracer.start_as_current_span("activation_verify") as span:
            span.set_attribute("operation", "activation_verify")

            serial = request.query_params.get("serial", "")
            token = request.query_params.get("token", "")
            span.set_attribute("serial_prefix", serial[:5])

            query = VerifyActivationQuery(serial=serial, token=token)
            outcome = await self.get_handler().handle(query)

            span.set_attribute("verification.status", outcome.status.value)
            if outcome.success:
                span.set_status(Status(StatusCode.OK))
            else:
                span.set_attribute("verification.code", outcome.code)
                span.set_status(Status(StatusCode.ERROR, outcome.code))

            serializer = ActivationVerifyResponseSerializer(outcome.to_response())
            return Response(serializer.data, status=status.HTTP_200_OK)
