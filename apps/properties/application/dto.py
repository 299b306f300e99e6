"""
Property DTOs

Wire-level shapes exchanged with the HTTP layer:
- PropertyCreateDto: Body of a create request
- PropertyUpdateDto: Body of a partial update; ``None`` means "leave as is"
- PropertyDto: Flat read model with image URLs and feature names
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from apps.properties.domain.entities import PropertyStatus


@dataclass
class PropertyCreateDto:
    title: str
    price: Decimal
    agent_id: UUID
    city_id: UUID
    property_type_id: UUID
    status: PropertyStatus
    description: Optional[str] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    square_feet: Optional[int] = None
    address: Optional[str] = None
    # Accepted on the wire but never honoured: new listings start unfeatured
    is_featured: Optional[bool] = None
    image_urls: Optional[List[Optional[str]]] = None
    features: Optional[List[Optional[str]]] = None


@dataclass
class PropertyUpdateDto:
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    agent_id: Optional[UUID] = None
    city_id: Optional[UUID] = None
    property_type_id: Optional[UUID] = None
    status: Optional[PropertyStatus] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    square_feet: Optional[int] = None
    address: Optional[str] = None
    features: Optional[List[Optional[str]]] = None


@dataclass
class PropertyDto:
    id: UUID
    title: str
    price: Decimal
    agent_id: UUID
    city_id: UUID
    property_type_id: UUID
    status: PropertyStatus
    description: Optional[str] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    square_feet: Optional[int] = None
    address: Optional[str] = None
    is_featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    image_urls: List[str] = field(default_factory=list)
    features: List[str] = field(default_factory=list)
