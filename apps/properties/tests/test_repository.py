"""Tests for the ORM-backed property repository."""

import uuid
from decimal import Decimal

import pytest

from apps.properties import models as orm
from apps.properties.domain.entities import Property, PropertyFeature, PropertyImage, PropertyStatus
from apps.properties.infrastructure.repositories import PropertyRepository

pytestmark = pytest.mark.django_db


@pytest.fixture
def repository():
    return PropertyRepository()


def build_property(**overrides):
    data = dict(
        title="Loft near the river",
        description="Bright two-bedroom loft",
        price=Decimal("250000.00"),
        agent_id=uuid.uuid4(),
        city_id=uuid.uuid4(),
        property_type_id=uuid.uuid4(),
        status=PropertyStatus.FOR_SALE,
        images=[
            PropertyImage(url="a.jpg", is_primary=True, display_order=0),
            PropertyImage(url="b.jpg", is_primary=False, display_order=1),
        ],
        features=[PropertyFeature(name="Pool"), PropertyFeature(name="Garage")],
    )
    data.update(overrides)
    return Property(**data)


def test_save_assigns_identity_and_timestamps(repository):
    saved = repository.save(build_property())

    assert saved.id is not None
    assert saved.created_at is not None
    assert saved.updated_at is not None
    assert all(image.id is not None for image in saved.images)
    assert orm.Property.objects.count() == 1


def test_find_by_id_returns_children_in_order(repository):
    saved = repository.save(build_property())

    found = repository.find_by_id(saved.id)

    assert [image.url for image in found.images] == ["a.jpg", "b.jpg"]
    assert [image.is_primary for image in found.images] == [True, False]
    assert [feature.name for feature in found.features] == ["Pool", "Garage"]
    assert found.status is PropertyStatus.FOR_SALE
    assert found.price == Decimal("250000.00")


def test_find_by_id_unknown_returns_none(repository):
    assert repository.find_by_id(uuid.uuid4()) is None


def test_saving_replaced_features_deletes_old_rows(repository):
    saved = repository.save(build_property())

    saved.replace_features([PropertyFeature(name="Sauna")])
    updated = repository.save(saved)

    assert [feature.name for feature in updated.features] == ["Sauna"]
    assert orm.PropertyFeature.objects.count() == 1
    assert orm.PropertyImage.objects.count() == 2


def test_update_keeps_id_and_changes_scalars(repository):
    saved = repository.save(build_property())
    saved.title = "Renamed"
    saved.status = PropertyStatus.SOLD

    updated = repository.save(saved)

    assert updated.id == saved.id
    assert updated.title == "Renamed"
    assert updated.status is PropertyStatus.SOLD
    assert orm.Property.objects.count() == 1


def test_delete_cascades_to_children(repository):
    saved = repository.save(build_property())

    repository.delete(saved)

    assert repository.find_by_id(saved.id) is None
    assert orm.PropertyImage.objects.count() == 0
    assert orm.PropertyFeature.objects.count() == 0


def test_find_by_agent_city_and_featured(repository):
    agent_id = uuid.uuid4()
    city_id = uuid.uuid4()
    mine = repository.save(build_property(agent_id=agent_id, city_id=city_id, is_featured=True))
    repository.save(build_property())

    assert [p.id for p in repository.find_by_agent_id(agent_id)] == [mine.id]
    assert [p.id for p in repository.find_by_city_id(city_id)] == [mine.id]
    assert [p.id for p in repository.find_by_featured_true()] == [mine.id]
    assert len(repository.find_all()) == 2


def test_search_combines_filters(repository):
    city_id = uuid.uuid4()
    type_id = uuid.uuid4()
    villa = repository.save(
        build_property(title="Sea View Villa", price=Decimal("900000.00"), city_id=city_id, property_type_id=type_id)
    )
    studio = repository.save(
        build_property(title="Studio", description="Tiny but near the sea", price=Decimal("80000.00"), city_id=city_id)
    )
    repository.save(build_property(title="Farmhouse", price=Decimal("50000.00")))

    assert {p.id for p in repository.search(text="sea")} == {villa.id, studio.id}
    assert [p.id for p in repository.search(text="sea", max_price=Decimal("100000"))] == [studio.id]
    assert [p.id for p in repository.search(city_id=city_id, property_type_id=type_id)] == [villa.id]
    assert len(repository.search()) == 3


def test_search_max_price_is_inclusive(repository):
    saved = repository.save(build_property(price=Decimal("100000.00")))

    assert [p.id for p in repository.search(max_price=Decimal("100000"))] == [saved.id]
    assert repository.search(max_price=Decimal("99999.99")) == []


def test_save_keeps_created_at_and_moves_updated_at(repository):
    saved = repository.save(build_property())

    saved.title = "Renamed"
    updated = repository.save(saved)
    assert updated.created_at == saved.created_at
    assert updated.updated_at > saved.updated_at

    updated.toggle_featured()
    toggled = repository.save(updated)
    assert toggled.created_at == saved.created_at
    assert toggled.updated_at > updated.updated_at
