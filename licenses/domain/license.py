"""
License domain entity.

This is the core domain entity representing a stored license record.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    Binds a serial number to a customer, a product and an order.
    This is an immutable value object; the license store owns it and
    the verification workflow only reads it.
    """

    id: uuid.UUID
    serial_number: str
    customer_id: Optional[int]
    product_id: Optional[int]
    order_id: Optional[int]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate license entity."""
        if not self.serial_number or len(self.serial_number.strip()) == 0:
            raise ValueError("Serial number is required")

    @classmethod
    def create(
        cls,
        serial_number: str,
        customer_id: Optional[int] = None,
        product_id: Optional[int] = None,
        order_id: Optional[int] = None,
        license_id: Optional[uuid.UUID] = None,
    ) -> "License":
        """
        Create a new License entity.

        Args:
            serial_number: License serial number
            customer_id: Optional customer identifier
            product_id: Optional product identifier
            order_id: Optional order identifier
            license_id: Optional UUID (generated if not provided)

        Returns:
            License entity instance
        """
        now = datetime.utcnow()
        return cls(
            id=license_id or uuid.uuid4(),
            serial_number=serial_number,
            customer_id=customer_id,
            product_id=product_id,
            order_id=order_id,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_fully_assigned(self) -> bool:
        """True when customer, product and order are all set."""
        return (
            self.customer_id is not None
            and self.product_id is not None
            and self.order_id is not None
        )
