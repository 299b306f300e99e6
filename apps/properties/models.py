"""Property persistence models.

Three tables back the listing aggregate: ``properties`` holds the
scalar columns, ``property_images`` and ``property_features`` hold the
owned child rows. Agent, city and property type are identifiers into
other services and are stored as plain UUID columns without foreign keys.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Property(models.Model):
    """Объявление о продаже или аренде недвижимости."""

    class Status(models.TextChoices):
        FOR_SALE = "FOR_SALE", _("For sale")
        FOR_RENT = "FOR_RENT", _("For rent")
        PENDING = "PENDING", _("Pending")
        SOLD = "SOLD", _("Sold")
        RENTED = "RENTED", _("Rented")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(max_length=2000, null=True, blank=True)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    agent_id = models.UUIDField(db_index=True, help_text=_("Identifier in the agent service."))
    city_id = models.UUIDField(db_index=True, help_text=_("Identifier in the city service."))
    property_type_id = models.UUIDField(help_text=_("Identifier in the property type service."))
    status = models.CharField(max_length=20, choices=Status.choices)
    bedrooms = models.PositiveIntegerField(null=True, blank=True)
    bathrooms = models.PositiveIntegerField(null=True, blank=True)
    square_feet = models.PositiveIntegerField(null=True, blank=True)
    address = models.CharField(max_length=255, null=True, blank=True)
    is_featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "properties"
        verbose_name = _("Property")
        verbose_name_plural = _("Properties")
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["is_featured"], name="properties_is_feat_3f1c2a_idx"),
            models.Index(fields=["property_type_id", "price"], name="properties_propert_8d4e7b_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class PropertyImage(models.Model):
    """Фотография объявления; первая по порядку является главной."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name="images")
    image_url = models.CharField(max_length=1000)
    is_primary = models.BooleanField(default=False)
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "property_images"
        verbose_name = _("Property image")
        verbose_name_plural = _("Property images")
        ordering = ["display_order"]

    def __str__(self) -> str:
        return f"{self.property_id} [{self.display_order}]"


class PropertyFeature(models.Model):
    """Особенность объекта (бассейн, гараж и т. п.)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name="features")
    feature_name = models.CharField(max_length=255)
    description = models.CharField(max_length=500, null=True, blank=True)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "property_features"
        verbose_name = _("Property feature")
        verbose_name_plural = _("Property features")
        ordering = ["position"]

    def __str__(self) -> str:
        return self.feature_name
