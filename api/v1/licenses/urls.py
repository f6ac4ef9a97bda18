"""
URL configuration for license verification API endpoints.
"""

from django.urls import path

from api.v1.licenses import views

app_name = "licenses_api"

urlpatterns = [
    path(
        "activation_verify",
        views.ActivationVerifyView.as_view(),
        name="activation-verify",
    ),
]
