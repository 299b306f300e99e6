import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Property",
            fields=[
                (
                    "id",
                    models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, max_length=2000, null=True)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("agent_id", models.UUIDField(db_index=True, help_text="Identifier in the agent service.")),
                ("city_id", models.UUIDField(db_index=True, help_text="Identifier in the city service.")),
                ("property_type_id", models.UUIDField(help_text="Identifier in the property type service.")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("FOR_SALE", "For sale"),
                            ("FOR_RENT", "For rent"),
                            ("PENDING", "Pending"),
                            ("SOLD", "Sold"),
                            ("RENTED", "Rented"),
                        ],
                        max_length=20,
                    ),
                ),
                ("bedrooms", models.PositiveIntegerField(blank=True, null=True)),
                ("bathrooms", models.PositiveIntegerField(blank=True, null=True)),
                ("square_feet", models.PositiveIntegerField(blank=True, null=True)),
                ("address", models.CharField(blank=True, max_length=255, null=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Property",
                "verbose_name_plural": "Properties",
                "db_table": "properties",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="PropertyImage",
            fields=[
                (
                    "id",
                    models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False),
                ),
                ("image_url", models.CharField(max_length=1000)),
                ("is_primary", models.BooleanField(default=False)),
                ("display_order", models.PositiveIntegerField(default=0)),
                (
                    "property",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="images",
                        to="properties.property",
                    ),
                ),
            ],
            options={
                "verbose_name": "Property image",
                "verbose_name_plural": "Property images",
                "db_table": "property_images",
                "ordering": ["display_order"],
            },
        ),
        migrations.CreateModel(
            name="PropertyFeature",
            fields=[
                (
                    "id",
                    models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False),
                ),
                ("feature_name", models.CharField(max_length=255)),
                ("description", models.CharField(blank=True, max_length=500, null=True)),
                ("position", models.PositiveIntegerField(default=0)),
                (
                    "property",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="features",
                        to="properties.property",
                    ),
                ),
            ],
            options={
                "verbose_name": "Property feature",
                "verbose_name_plural": "Property features",
                "db_table": "property_features",
                "ordering": ["position"],
            },
        ),
        migrations.AddIndex(
            model_name="property",
            index=models.Index(fields=["is_featured"], name="properties_is_feat_3f1c2a_idx"),
        ),
        migrations.AddIndex(
            model_name="property",
            index=models.Index(fields=["property_type_id", "price"], name="properties_propert_8d4e7b_idx"),
        ),
    ]
