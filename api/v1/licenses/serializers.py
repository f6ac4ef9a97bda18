"""
Serializers for License verification API endpoints.
"""

from rest_framework import serializers

from core.domain.value_objects import VerificationStatus


class ActivationVerifyResponseSerializer(serializers.Serializer):
    """Serializer for activation verify response."""

    message = serializers.CharField()
    response = serializers.ChoiceField(choices=[status.value for status in VerificationStatus])
