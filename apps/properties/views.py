"""Property API views."""

from __future__ import annotations

from uuid import UUID

from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .application.services import get_property_service
from .domain.exceptions import PropertyNotFoundError
from .serializers import (
    PropertyCreateSerializer,
    PropertySearchParamsSerializer,
    PropertySerializer,
    PropertyUpdateSerializer,
)

SEARCH_PARAMETERS = [
    OpenApiParameter("search", str, description="Подстрока заголовка или описания"),
    OpenApiParameter("cityId", UUID),
    OpenApiParameter("propertyTypeId", UUID),
    OpenApiParameter("maxPrice", float, description="Максимальная цена (включительно)"),
]


def _parse_id(raw) -> UUID:
    # A malformed id cannot match any row, so it reads as "not found".
    try:
        return UUID(str(raw))
    except ValueError as exc:
        raise PropertyNotFoundError(raw) from exc


class PropertyViewSet(viewsets.ViewSet):
    """Viewset для управления объектами недвижимости."""

    lookup_value_regex = "[^/]+"
    serializer_class = PropertySerializer

    @property
    def service(self):
        return get_property_service()

    def _render(self, data, many: bool = False, status_code: int = status.HTTP_200_OK) -> Response:
        return Response(PropertySerializer(data, many=many).data, status=status_code)

    def _search(self, request) -> Response:
        params = PropertySearchParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        found = self.service.search_properties(
            search=params.validated_data.get("search"),
            city_id=params.validated_data.get("city_id"),
            property_type_id=params.validated_data.get("property_type_id"),
            max_price=params.validated_data.get("max_price"),
        )
        return self._render(found, many=True)

    @extend_schema(parameters=SEARCH_PARAMETERS, responses=PropertySerializer(many=True))
    def list(self, request):  # type: ignore
        if PropertySearchParamsSerializer.has_any(request.query_params):
            return self._search(request)
        return self._render(self.service.list_properties(), many=True)

    @extend_schema(responses=PropertySerializer)
    def retrieve(self, request, pk=None):  # type: ignore
        return self._render(self.service.get_property(_parse_id(pk)))

    @extend_schema(request=PropertyCreateSerializer, responses={201: PropertySerializer})
    def create(self, request):  # type: ignore
        serializer = PropertyCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        created = self.service.create_property(serializer.to_dto())
        return self._render(created, status_code=status.HTTP_201_CREATED)

    @extend_schema(request=PropertyUpdateSerializer, responses=PropertySerializer)
    def update(self, request, pk=None):  # type: ignore
        property_id = _parse_id(pk)
        serializer = PropertyUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        updated = self.service.update_property(property_id, serializer.to_dto())
        return self._render(updated)

    @extend_schema(responses={204: None})
    def destroy(self, request, pk=None):  # type: ignore
        self.service.delete_property(_parse_id(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses=PropertySerializer(many=True))
    @action(detail=False, methods=["get"])
    def featured(self, request):  # type: ignore
        return self._render(self.service.list_featured(), many=True)

    @extend_schema(request=None, responses={200: None})
    @action(detail=True, methods=["put"], url_path="feature")
    def toggle_featured(self, request, pk=None):  # type: ignore
        self.service.toggle_featured(_parse_id(pk))
        return Response(status=status.HTTP_200_OK)

    @extend_schema(parameters=SEARCH_PARAMETERS, responses=PropertySerializer(many=True))
    @action(detail=False, methods=["get"])
    def search(self, request):  # type: ignore
        return self._search(request)

    @extend_schema(responses=PropertySerializer(many=True))
    @action(detail=False, methods=["get"], url_path=r"agent/(?P<agent_id>[^/]+)")
    def by_agent(self, request, agent_id=None):  # type: ignore
        try:
            agent_uuid = UUID(str(agent_id))
        except ValueError:
            return self._render([], many=True)
        return self._render(self.service.list_by_agent(agent_uuid), many=True)

    @extend_schema(responses=PropertySerializer(many=True))
    @action(detail=False, methods=["get"], url_path=r"city/(?P<city_id>[^/]+)")
    def by_city(self, request, city_id=None):  # type: ignore
        try:
            city_uuid = UUID(str(city_id))
        except ValueError:
            return self._render([], many=True)
        return self._render(self.service.list_by_city(city_uuid), many=True)
