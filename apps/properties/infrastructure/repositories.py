"""
Property Repository

Maps the Property aggregate to the ``properties``, ``property_images``
and ``property_features`` tables. Every read returns fully populated
aggregates: children are prefetched in one extra query per collection
and copied into plain dataclasses before leaving this module, so no
lazy ORM state is visible to callers.
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import UUID

from django.db import transaction  # type: ignore
from django.db.models import Prefetch, QuerySet  # type: ignore

from apps.properties import models as orm
from apps.properties.domain.entities import (
    Property,
    PropertyFeature,
    PropertyImage,
    PropertyStatus,
)
from apps.properties.filters import PropertySearchFilterSet

SCALAR_FIELDS = (
    "title",
    "description",
    "price",
    "agent_id",
    "city_id",
    "property_type_id",
    "bedrooms",
    "bathrooms",
    "square_feet",
    "address",
    "is_featured",
)


class PropertyRepository:
    """Persistence for Property aggregates backed by the Django ORM."""

    def _base_queryset(self) -> QuerySet:
        return orm.Property.objects.prefetch_related(
            Prefetch("images", queryset=orm.PropertyImage.objects.order_by("display_order")),
            Prefetch("features", queryset=orm.PropertyFeature.objects.order_by("position")),
        )

    # ------------------------------------------------------------------
    # Reads

    def find_all(self) -> List[Property]:
        return self._to_domain_list(self._base_queryset())

    def find_by_id(self, property_id: UUID) -> Optional[Property]:
        row = self._base_queryset().filter(pk=property_id).first()
        if row is None:
            return None
        return self._to_domain(row)

    def find_by_agent_id(self, agent_id: UUID) -> List[Property]:
        return self._to_domain_list(self._base_queryset().filter(agent_id=agent_id))

    def find_by_city_id(self, city_id: UUID) -> List[Property]:
        return self._to_domain_list(self._base_queryset().filter(city_id=city_id))

    def find_by_featured_true(self) -> List[Property]:
        return self._to_domain_list(self._base_queryset().filter(is_featured=True))

    def search(
        self,
        text: Optional[str] = None,
        city_id: Optional[UUID] = None,
        property_type_id: Optional[UUID] = None,
        max_price: Optional[Decimal] = None,
    ) -> List[Property]:
        """Return properties matching every supplied filter; ``None`` means no restriction."""
        data = {}
        if text is not None:
            data["search"] = text
        if city_id is not None:
            data["city_id"] = str(city_id)
        if property_type_id is not None:
            data["property_type_id"] = str(property_type_id)
        if max_price is not None:
            data["max_price"] = str(max_price)

        filterset = PropertySearchFilterSet(data=data, queryset=self._base_queryset())
        if not filterset.is_valid():
            raise ValueError(f"Invalid search filters: {dict(filterset.errors)}")
        return self._to_domain_list(filterset.qs)

    # ------------------------------------------------------------------
    # Writes

    def save(self, prop: Property) -> Property:
        """
        Insert or update the aggregate and mirror its child collections.

        Children without an id are inserted, children with an id are
        updated, and stored children missing from the in-memory lists are
        deleted. Returns the aggregate as re-read from storage.
        """
        with transaction.atomic():
            values = {name: getattr(prop, name) for name in SCALAR_FIELDS}
            values["status"] = prop.status.value

            row = None
            if prop.id is not None:
                row = orm.Property.objects.filter(pk=prop.id).first()
            if row is None:
                row = orm.Property(id=prop.id or uuid.uuid4(), **values)
            else:
                for name, value in values.items():
                    setattr(row, name, value)
            # auto_now refreshes updated_at on every save
            row.save()

            prop.id = row.pk
            self._sync_images(row, prop.images)
            self._sync_features(row, prop.features)

        saved = self.find_by_id(row.pk)
        if saved is None:
            raise RuntimeError(f"Property {row.pk} vanished right after save")
        return saved

    def delete(self, prop: Property) -> None:
        if prop.id is None:
            return
        # images and features go with it via ON DELETE CASCADE
        orm.Property.objects.filter(pk=prop.id).delete()

    # ------------------------------------------------------------------
    # Child collection mirroring

    def _sync_images(self, row: orm.Property, images: Iterable[PropertyImage]) -> None:
        kept: List[UUID] = []
        for image in images:
            if image.id is None:
                image.id = uuid.uuid4()
                orm.PropertyImage.objects.create(
                    id=image.id,
                    property=row,
                    image_url=image.url,
                    is_primary=image.is_primary,
                    display_order=image.display_order,
                )
            else:
                orm.PropertyImage.objects.update_or_create(
                    id=image.id,
                    property=row,
                    defaults={
                        "image_url": image.url,
                        "is_primary": image.is_primary,
                        "display_order": image.display_order,
                    },
                )
            kept.append(image.id)
        orm.PropertyImage.objects.filter(property=row).exclude(id__in=kept).delete()

    def _sync_features(self, row: orm.Property, features: Iterable[PropertyFeature]) -> None:
        kept: List[UUID] = []
        for position, feature in enumerate(features):
            if feature.id is None:
                feature.id = uuid.uuid4()
                orm.PropertyFeature.objects.create(
                    id=feature.id,
                    property=row,
                    feature_name=feature.name,
                    description=feature.description,
                    position=position,
                )
            else:
                orm.PropertyFeature.objects.update_or_create(
                    id=feature.id,
                    property=row,
                    defaults={
                        "feature_name": feature.name,
                        "description": feature.description,
                        "position": position,
                    },
                )
            kept.append(feature.id)
        orm.PropertyFeature.objects.filter(property=row).exclude(id__in=kept).delete()

    # ------------------------------------------------------------------
    # Row -> aggregate mapping

    def _to_domain_list(self, rows: Iterable[orm.Property]) -> List[Property]:
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_domain(row: orm.Property) -> Property:
        return Property(
            id=row.id,
            title=row.title,
            description=row.description,
            price=row.price,
            agent_id=row.agent_id,
            city_id=row.city_id,
            property_type_id=row.property_type_id,
            status=PropertyStatus(row.status),
            bedrooms=row.bedrooms,
            bathrooms=row.bathrooms,
            square_feet=row.square_feet,
            address=row.address,
            is_featured=row.is_featured,
            created_at=row.created_at,
            updated_at=row.updated_at,
            images=[
                PropertyImage(
                    id=image.id,
                    url=image.image_url,
                    is_primary=image.is_primary,
                    display_order=image.display_order,
                )
                for image in row.images.all()
            ],
            features=[
                PropertyFeature(
                    id=feature.id,
                    name=feature.feature_name,
                    description=feature.description,
                )
                for feature in row.features.all()
            ],
        )
