"""
Property Domain Entities

Core entities of the listing domain:
- Property: Aggregate root of a listing
- PropertyImage: Ordered photo owned by a listing
- PropertyFeature: Named amenity owned by a listing
- PropertyStatus: Closed set of listing states
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from uuid import UUID

from shared.domain.base import Aggregate, Entity


class PropertyStatus(Enum):
    FOR_SALE = 'FOR_SALE'
    FOR_RENT = 'FOR_RENT'
    PENDING = 'PENDING'
    SOLD = 'SOLD'
    RENTED = 'RENTED'


@dataclass(eq=False)
class PropertyImage(Entity):
    url: str = ''
    is_primary: bool = False
    display_order: int = 0


@dataclass(eq=False)
class PropertyFeature(Entity):
    name: str = ''
    description: Optional[str] = None


@dataclass(eq=False)
class Property(Aggregate):
    """
    Property Aggregate Root

    A listing published by an agent in a city. Agent, city and property
    type live in other services and are referenced by identifier only.

    Key invariants:
    - Images and features belong to exactly one property and are
      persisted and deleted together with it
    - The image at display order 0 is the primary one
    - Blank image URLs and feature names never make it into the lists
    """

    title: str = ''
    description: Optional[str] = None
    price: Decimal = Decimal('0')
    agent_id: Optional[UUID] = None
    city_id: Optional[UUID] = None
    property_type_id: Optional[UUID] = None
    status: PropertyStatus = PropertyStatus.FOR_SALE
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    square_feet: Optional[int] = None
    address: Optional[str] = None
    is_featured: bool = False
    images: List[PropertyImage] = field(default_factory=list)
    features: List[PropertyFeature] = field(default_factory=list)

    @property
    def primary_image(self) -> Optional[PropertyImage]:
        for image in self.images:
            if image.is_primary:
                return image
        return None

    def toggle_featured(self) -> bool:
        """Flip the featured flag and return the new value."""
        self.is_featured = not self.is_featured
        return self.is_featured

    def replace_features(self, features: List[PropertyFeature]) -> None:
        """Discard the current feature set and take ``features`` instead."""
        self.features.clear()
        self.features.extend(features)
