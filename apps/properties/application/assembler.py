"""
Property Assembler

Converts between the DTOs and the Property aggregate and owns every
defaulting rule on the way:

- new listings are never featured, whatever the request says
- image URLs and feature names are trimmed; blank or null ones are dropped
- image display order is the position after filtering, and only the
  first image is primary
- a partial update overwrites only the fields it carries; a feature list,
  even an empty one, replaces the whole feature set
"""

from typing import Iterable, List, Optional

from apps.properties.application.dto import PropertyCreateDto, PropertyDto, PropertyUpdateDto
from apps.properties.domain.entities import Property, PropertyFeature, PropertyImage

UPDATABLE_FIELDS = (
    "title",
    "description",
    "price",
    "agent_id",
    "city_id",
    "property_type_id",
    "status",
    "bedrooms",
    "bathrooms",
    "square_feet",
    "address",
)


def _clean(values: Optional[Iterable[Optional[str]]]) -> List[str]:
    if not values:
        return []
    cleaned = []
    for value in values:
        if value is None:
            continue
        value = value.strip()
        if value:
            cleaned.append(value)
    return cleaned


def build_features(names: Optional[Iterable[Optional[str]]]) -> List[PropertyFeature]:
    return [PropertyFeature(name=name) for name in _clean(names)]


def build_images(urls: Optional[Iterable[Optional[str]]]) -> List[PropertyImage]:
    return [
        PropertyImage(url=url, is_primary=(order == 0), display_order=order)
        for order, url in enumerate(_clean(urls))
    ]


def to_new_property(dto: PropertyCreateDto) -> Property:
    """Build an unsaved aggregate from a create request."""
    return Property(
        title=dto.title,
        description=dto.description,
        price=dto.price,
        agent_id=dto.agent_id,
        city_id=dto.city_id,
        property_type_id=dto.property_type_id,
        status=dto.status,
        bedrooms=dto.bedrooms,
        bathrooms=dto.bathrooms,
        square_feet=dto.square_feet,
        address=dto.address,
        is_featured=False,
        images=build_images(dto.image_urls),
        features=build_features(dto.features),
    )


def apply_update(prop: Property, dto: PropertyUpdateDto) -> Property:
    """Merge a partial update into ``prop`` in place and return it."""
    for name in UPDATABLE_FIELDS:
        value = getattr(dto, name)
        if value is not None:
            setattr(prop, name, value)

    if dto.features is not None:
        prop.replace_features(build_features(dto.features))

    # Images are fixed at creation; the update request has no images field.
    return prop


def to_dto(prop: Property) -> PropertyDto:
    return PropertyDto(
        id=prop.id,
        title=prop.title,
        description=prop.description,
        price=prop.price,
        agent_id=prop.agent_id,
        city_id=prop.city_id,
        property_type_id=prop.property_type_id,
        status=prop.status,
        bedrooms=prop.bedrooms,
        bathrooms=prop.bathrooms,
        square_feet=prop.square_feet,
        address=prop.address,
        is_featured=prop.is_featured,
        created_at=prop.created_at,
        updated_at=prop.updated_at,
        image_urls=[image.url for image in prop.images if image.url and image.url.strip()],
        features=[feature.name for feature in prop.features if feature.name and feature.name.strip()],
    )


def to_dto_list(properties: Iterable[Property]) -> List[PropertyDto]:
    return [to_dto(prop) for prop in properties]
