"""
License model.
"""
import uuid

from django.db import models


class License(models.Model):
    """
    A stored license binding a serial number to a customer, product and order.
    Owned by the license store; activation verification only reads it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    serial_number = models.CharField(max_length=35, unique=True, db_index=True)
    customer_id = models.PositiveBigIntegerField(
        null=True, blank=True, help_text="Customer (user) the license is assigned to"
    )
    product_id = models.PositiveBigIntegerField(
        null=True, blank=True, help_text="Product the license is assigned to"
    )
    order_id = models.PositiveBigIntegerField(
        null=True, blank=True, help_text="Order the license was sold with"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "licenses"
        db_table = "licenses"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer_id"], name="licenses_custome_6f1c2a_idx"),
            models.Index(fields=["order_id"], name="licenses_order_i_9b3e4d_idx"),
        ]

    def __str__(self):
        return self.serial_number

    @property
    def is_fully_assigned(self) -> bool:
        """
        Check if license is assigned to a customer, product and order.

        Returns:
            True if all three assignments are present
        """
        return (
            self.customer_id is not None
            and self.product_id is not None
            and self.order_id is not None
        )
