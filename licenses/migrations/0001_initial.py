import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="License",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "serial_number",
                    models.CharField(db_index=True, max_length=35, unique=True),
                ),
                (
                    "customer_id",
                    models.PositiveBigIntegerField(
                        blank=True,
                        help_text="Customer (user) the license is assigned to",
                        null=True,
                    ),
                ),
                (
                    "product_id",
                    models.PositiveBigIntegerField(
                        blank=True, help_text="Product the license is assigned to", null=True
                    ),
                ),
                (
                    "order_id",
                    models.PositiveBigIntegerField(
                        blank=True, help_text="Order the license was sold with", null=True
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "licenses",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["customer_id"], name="licenses_custome_6f1c2a_idx"),
                    models.Index(fields=["order_id"], name="licenses_order_i_9b3e4d_idx"),
                ],
            },
        ),
    ]
