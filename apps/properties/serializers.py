"""Serializers for the properties API. Wire keys are camelCase."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .application.dto import PropertyCreateDto, PropertyUpdateDto
from .domain.entities import PropertyStatus

STATUS_CHOICES = [status.value for status in PropertyStatus]


def _string_list_field(max_length: int, **kwargs):
    # Blank and null entries are accepted here and dropped by the assembler.
    return serializers.ListField(
        child=serializers.CharField(
            max_length=max_length, allow_null=True, allow_blank=True, trim_whitespace=False
        ),
        **kwargs,
    )


class PropertyCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(max_length=2000, required=False, allow_null=True, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    agentId = serializers.UUIDField(source="agent_id")
    cityId = serializers.UUIDField(source="city_id")
    propertyTypeId = serializers.UUIDField(source="property_type_id")
    status = serializers.ChoiceField(choices=STATUS_CHOICES)
    bedrooms = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    bathrooms = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    squareFeet = serializers.IntegerField(source="square_feet", min_value=0, required=False, allow_null=True)
    address = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    isFeatured = serializers.BooleanField(source="is_featured", required=False, allow_null=True)
    imageUrls = _string_list_field(1000, source="image_urls", required=False, allow_null=True)
    features = _string_list_field(255, required=False, allow_null=True)

    def to_dto(self) -> PropertyCreateDto:
        data = dict(self.validated_data)
        data["status"] = PropertyStatus(data["status"])
        return PropertyCreateDto(**data)


class PropertyUpdateSerializer(serializers.Serializer):
    """Partial update: absent and null keys both mean "unchanged"."""

    title = serializers.CharField(max_length=255, required=False, allow_null=True)
    description = serializers.CharField(max_length=2000, required=False, allow_null=True, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True)
    agentId = serializers.UUIDField(source="agent_id", required=False, allow_null=True)
    cityId = serializers.UUIDField(source="city_id", required=False, allow_null=True)
    propertyTypeId = serializers.UUIDField(source="property_type_id", required=False, allow_null=True)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False, allow_null=True)
    bedrooms = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    bathrooms = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    squareFeet = serializers.IntegerField(source="square_feet", min_value=0, required=False, allow_null=True)
    address = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    features = _string_list_field(255, required=False, allow_null=True)

    def to_dto(self) -> PropertyUpdateDto:
        data = dict(self.validated_data)
        if data.get("status") is not None:
            data["status"] = PropertyStatus(data["status"])
        return PropertyUpdateDto(**data)


class PropertySerializer(serializers.Serializer):
    """Read model rendered from a PropertyDto."""

    id = serializers.UUIDField(read_only=True)
    title = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    agentId = serializers.UUIDField(source="agent_id", read_only=True)
    cityId = serializers.UUIDField(source="city_id", read_only=True)
    propertyTypeId = serializers.UUIDField(source="property_type_id", read_only=True)
    status = serializers.CharField(source="status.value", read_only=True)
    bedrooms = serializers.IntegerField(read_only=True, allow_null=True)
    bathrooms = serializers.IntegerField(read_only=True, allow_null=True)
    squareFeet = serializers.IntegerField(source="square_feet", read_only=True, allow_null=True)
    address = serializers.CharField(read_only=True, allow_null=True)
    isFeatured = serializers.BooleanField(source="is_featured", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    imageUrls = serializers.ListField(source="image_urls", child=serializers.CharField(), read_only=True)
    features = serializers.ListField(child=serializers.CharField(), read_only=True)


class PropertySearchParamsSerializer(serializers.Serializer):
    """Query parameters of the search endpoints; every one is optional."""

    search = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    cityId = serializers.UUIDField(source="city_id", required=False)
    propertyTypeId = serializers.UUIDField(source="property_type_id", required=False)
    maxPrice = serializers.DecimalField(source="max_price", max_digits=None, decimal_places=None, required=False)

    PARAM_NAMES = ("search", "cityId", "propertyTypeId", "maxPrice")

    @classmethod
    def has_any(cls, query_params) -> bool:
        return any(name in query_params for name in cls.PARAM_NAMES)
