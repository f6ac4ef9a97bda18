"""
Django admin configuration for licenses app.
"""
from django.contrib import admin

from licenses.infrastructure.models import License


class AssignmentFilter(admin.SimpleListFilter):
    """Filter licenses by whether they are fully assigned."""

    title = "assignment"
    parameter_name = "assigned"

    def lookups(self, request, model_admin):
        return [("yes", "Fully assigned"), ("no", "Incomplete")]

    def queryset(self, request, queryset):
        assigned = {
            "customer_id__isnull": False,
            "product_id__isnull": False,
            "order_id__isnull": False,
        }
        if self.value() == "yes":
            return queryset.filter(**assigned)
        if self.value() == "no":
            return queryset.exclude(**assigned)
        return queryset


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "serial_number",
        "customer_id",
        "product_id",
        "order_id",
        "is_fully_assigned",
        "created_at",
    ]
    list_filter = [AssignmentFilter, "created_at"]
    search_fields = ["serial_number"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "serial_number"),
            },
        ),
        (
            "Assignment",
            {
                "fields": ("customer_id", "product_id", "order_id"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    @admin.display(boolean=True, description="Fully assigned")
    def is_fully_assigned(self, obj):
        """Display whether customer, product and order are set."""
        return obj.is_fully_assigned
