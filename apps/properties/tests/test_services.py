"""Tests for the property use cases with in-memory collaborators."""

import uuid
from decimal import Decimal

import pytest
from django.core.cache import cache

from apps.properties.application.dto import PropertyCreateDto, PropertyUpdateDto
from apps.properties.application.services import PropertyService
from apps.properties.domain.entities import PropertyStatus
from apps.properties.domain.exceptions import (
    PropertyNotFoundError,
    ReferenceKind,
    ReferenceNotFoundError,
    UpstreamUnavailableError,
)
from apps.properties.infrastructure.cache import PropertyListCache

from .fakes import InMemoryPropertyRepository, StubValidator

pytestmark = pytest.mark.django_db


@pytest.fixture
def repository():
    return InMemoryPropertyRepository()


@pytest.fixture
def validator():
    return StubValidator()


@pytest.fixture
def service(repository, validator):
    return PropertyService(repository, validator)


def make_create_dto(**overrides):
    data = dict(
        title="Loft near the river",
        description="Bright two-bedroom loft",
        price=Decimal("250000.00"),
        agent_id=uuid.uuid4(),
        city_id=uuid.uuid4(),
        property_type_id=uuid.uuid4(),
        status=PropertyStatus.FOR_SALE,
        image_urls=["a.jpg", "b.jpg"],
        features=["Pool"],
    )
    data.update(overrides)
    return PropertyCreateDto(**data)


def test_create_checks_references_in_order(service, validator):
    dto = make_create_dto(is_featured=True)

    created = service.create_property(dto)

    assert validator.calls == [
        (ReferenceKind.AGENT, dto.agent_id),
        (ReferenceKind.CITY, dto.city_id),
        (ReferenceKind.PROPERTY_TYPE, dto.property_type_id),
    ]
    assert created.id is not None
    assert created.is_featured is False
    assert created.image_urls == ["a.jpg", "b.jpg"]
    assert created.features == ["Pool"]


def test_create_with_missing_agent_never_saves(repository, validator, service):
    dto = make_create_dto()
    validator.missing.add(dto.agent_id)

    with pytest.raises(ReferenceNotFoundError) as excinfo:
        service.create_property(dto)

    assert str(excinfo.value) == f"Agent not found with id: {dto.agent_id}"
    assert repository.save_calls == 0
    assert validator.calls == [(ReferenceKind.AGENT, dto.agent_id)]


def test_create_with_missing_city_stops_before_property_type(repository, validator, service):
    dto = make_create_dto()
    validator.missing.add(dto.city_id)

    with pytest.raises(ReferenceNotFoundError) as excinfo:
        service.create_property(dto)

    assert excinfo.value.kind is ReferenceKind.CITY
    assert [kind for kind, _ in validator.calls] == [ReferenceKind.AGENT, ReferenceKind.CITY]
    assert repository.save_calls == 0


def test_create_propagates_upstream_failure(repository):
    dto = make_create_dto()
    failing = StubValidator(error=UpstreamUnavailableError(ReferenceKind.AGENT, dto.agent_id, "timeout"))
    service = PropertyService(repository, failing)

    with pytest.raises(UpstreamUnavailableError):
        service.create_property(dto)

    assert repository.save_calls == 0


def test_get_missing_property_raises(service):
    missing_id = uuid.uuid4()
    with pytest.raises(PropertyNotFoundError) as excinfo:
        service.get_property(missing_id)
    assert str(excinfo.value) == f"Property not found with id: {missing_id}"


def test_update_missing_property_raises(service):
    with pytest.raises(PropertyNotFoundError):
        service.update_property(uuid.uuid4(), PropertyUpdateDto(title="x"))


def test_partial_update_keeps_other_fields(service, validator):
    created = service.create_property(make_create_dto())
    validator.calls.clear()

    updated = service.update_property(created.id, PropertyUpdateDto(title="Renamed"))

    assert updated.title == "Renamed"
    assert updated.price == Decimal("250000.00")
    assert updated.description == "Bright two-bedroom loft"
    assert updated.image_urls == ["a.jpg", "b.jpg"]
    assert validator.calls == []


def test_update_validates_only_new_references(service, validator):
    created = service.create_property(make_create_dto())
    validator.calls.clear()
    new_city = uuid.uuid4()

    updated = service.update_property(created.id, PropertyUpdateDto(city_id=new_city))

    assert validator.calls == [(ReferenceKind.CITY, new_city)]
    assert updated.city_id == new_city


def test_update_with_missing_property_type_leaves_listing_unchanged(repository, service, validator):
    created = service.create_property(make_create_dto())
    missing_type = uuid.uuid4()
    validator.missing.add(missing_type)
    saves_before = repository.save_calls

    with pytest.raises(ReferenceNotFoundError):
        service.update_property(created.id, PropertyUpdateDto(title="Nope", property_type_id=missing_type))

    assert repository.save_calls == saves_before
    assert service.get_property(created.id).title == "Loft near the river"


def test_update_feature_list_replaces_or_keeps(service):
    created = service.create_property(make_create_dto(features=["Pool", "Garage"]))

    kept = service.update_property(created.id, PropertyUpdateDto(price=Decimal("1.00")))
    assert kept.features == ["Pool", "Garage"]

    cleared = service.update_property(created.id, PropertyUpdateDto(features=[]))
    assert cleared.features == []


def test_toggle_featured_twice_restores_flag(service):
    created = service.create_property(make_create_dto())

    service.toggle_featured(created.id)
    assert service.get_property(created.id).is_featured is True
    assert [dto.id for dto in service.list_featured()] == [created.id]

    service.toggle_featured(created.id)
    assert service.get_property(created.id).is_featured is False
    assert service.list_featured() == []


def test_toggle_missing_property_raises(service):
    with pytest.raises(PropertyNotFoundError):
        service.toggle_featured(uuid.uuid4())


def test_delete_removes_listing(service):
    created = service.create_property(make_create_dto())

    service.delete_property(created.id)

    with pytest.raises(PropertyNotFoundError):
        service.get_property(created.id)
    with pytest.raises(PropertyNotFoundError):
        service.delete_property(created.id)


def test_lists_by_agent_and_city(service):
    agent_id = uuid.uuid4()
    city_id = uuid.uuid4()
    mine = service.create_property(make_create_dto(agent_id=agent_id, city_id=city_id))
    service.create_property(make_create_dto())

    assert [dto.id for dto in service.list_by_agent(agent_id)] == [mine.id]
    assert [dto.id for dto in service.list_by_city(city_id)] == [mine.id]
    assert service.list_by_agent(uuid.uuid4()) == []


def test_search_delegates_filters(service):
    service.create_property(make_create_dto(title="Sea view villa", price=Decimal("900000.00")))
    cheap = service.create_property(make_create_dto(title="Studio", price=Decimal("80000.00")))

    found = service.search_properties(max_price=Decimal("100000"))

    assert [dto.id for dto in found] == [cheap.id]
    assert len(service.search_properties(search="VILLA")) == 1
    assert len(service.search_properties()) == 2


def test_list_cache_is_used_and_evicted_on_write(
    repository, validator, settings, django_capture_on_commit_callbacks
):
    settings.PROPERTY_LIST_CACHE_ENABLED = True
    cache.clear()
    service = PropertyService(repository, validator, list_cache=PropertyListCache())

    with django_capture_on_commit_callbacks(execute=True):
        service.create_property(make_create_dto())

    assert len(service.list_properties()) == 1
    assert len(service.list_properties()) == 1
    assert repository.find_all_calls == 1

    with django_capture_on_commit_callbacks(execute=True):
        service.create_property(make_create_dto())

    assert len(service.list_properties()) == 2
    assert repository.find_all_calls == 2
    cache.clear()


def test_list_cache_disabled_by_default(repository, validator):
    service = PropertyService(repository, validator, list_cache=PropertyListCache())

    service.list_properties()
    service.list_properties()

    assert repository.find_all_calls == 2
