"""
Property Service

Use cases of the listing domain. Every public method is one use case
and runs inside a single unit of work.

Use cases:
- list / get / search / list by agent / list by city / list featured
- create: validate references, assemble, save, re-read
- update: load, validate new references, merge, save, re-read
- delete, toggle featured
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import List, Optional
from uuid import UUID

import structlog

from apps.properties.application import assembler
from apps.properties.application.dto import PropertyCreateDto, PropertyDto, PropertyUpdateDto
from apps.properties.domain.entities import Property
from apps.properties.domain.exceptions import (
    PropertyNotFoundError,
    ReferenceKind,
    ReferenceNotFoundError,
)
from apps.properties.infrastructure.cache import PropertyListCache
from apps.properties.infrastructure.clients import ServiceReferenceValidator
from apps.properties.infrastructure.repositories import PropertyRepository
from shared.application.uow import DjangoUnitOfWork


class PropertyService:
    """Facade over the repository and the peer-service validator."""

    def __init__(self, repository, validator, list_cache: Optional[PropertyListCache] = None, logger=None):
        self.repository = repository
        self.validator = validator
        self.list_cache = list_cache
        self.logger = logger or structlog.get_logger(__name__)

    # ===== Queries =====

    def list_properties(self) -> List[PropertyDto]:
        with DjangoUnitOfWork(name="list_properties"):
            if self.list_cache is not None:
                result = self.list_cache.get_or_build(self._load_all)
            else:
                result = self._load_all()
        self.logger.info("properties_listed", count=len(result))
        return result

    def get_property(self, property_id: UUID) -> PropertyDto:
        with DjangoUnitOfWork(name="get_property"):
            prop = self._load(property_id)
        return assembler.to_dto(prop)

    def search_properties(
        self,
        search: Optional[str] = None,
        city_id: Optional[UUID] = None,
        property_type_id: Optional[UUID] = None,
        max_price: Optional[Decimal] = None,
    ) -> List[PropertyDto]:
        self.logger.debug(
            "properties_search",
            search=search,
            city_id=str(city_id) if city_id else None,
            property_type_id=str(property_type_id) if property_type_id else None,
            max_price=str(max_price) if max_price is not None else None,
        )
        with DjangoUnitOfWork(name="search_properties"):
            found = self.repository.search(search, city_id, property_type_id, max_price)
        return assembler.to_dto_list(found)

    def list_by_agent(self, agent_id: UUID) -> List[PropertyDto]:
        with DjangoUnitOfWork(name="list_by_agent"):
            found = self.repository.find_by_agent_id(agent_id)
        return assembler.to_dto_list(found)

    def list_by_city(self, city_id: UUID) -> List[PropertyDto]:
        with DjangoUnitOfWork(name="list_by_city"):
            found = self.repository.find_by_city_id(city_id)
        return assembler.to_dto_list(found)

    def list_featured(self) -> List[PropertyDto]:
        with DjangoUnitOfWork(name="list_featured"):
            found = self.repository.find_by_featured_true()
        return assembler.to_dto_list(found)

    # ===== Commands =====

    def create_property(self, dto: PropertyCreateDto) -> PropertyDto:
        self.logger.info("property_create_requested", title=dto.title)
        with DjangoUnitOfWork(name="create_property") as uow:
            self._validate_reference(ReferenceKind.AGENT, dto.agent_id)
            self._validate_reference(ReferenceKind.CITY, dto.city_id)
            self._validate_reference(ReferenceKind.PROPERTY_TYPE, dto.property_type_id)

            prop = assembler.to_new_property(dto)
            saved = self.repository.save(prop)
            reloaded = self._load(saved.id)
            self._evict_list_cache(uow)

        self.logger.info(
            "property_created",
            property_id=str(reloaded.id),
            images=len(reloaded.images),
            features=len(reloaded.features),
        )
        return assembler.to_dto(reloaded)

    def update_property(self, property_id: UUID, dto: PropertyUpdateDto) -> PropertyDto:
        self.logger.info("property_update_requested", property_id=str(property_id))
        with DjangoUnitOfWork(name="update_property") as uow:
            prop = self._load(property_id)

            if dto.agent_id is not None:
                self._validate_reference(ReferenceKind.AGENT, dto.agent_id)
            if dto.city_id is not None:
                self._validate_reference(ReferenceKind.CITY, dto.city_id)
            if dto.property_type_id is not None:
                self._validate_reference(ReferenceKind.PROPERTY_TYPE, dto.property_type_id)

            assembler.apply_update(prop, dto)
            saved = self.repository.save(prop)
            reloaded = self._load(saved.id)
            self._evict_list_cache(uow)

        self.logger.info("property_updated", property_id=str(property_id))
        return assembler.to_dto(reloaded)

    def delete_property(self, property_id: UUID) -> None:
        self.logger.info("property_delete_requested", property_id=str(property_id))
        with DjangoUnitOfWork(name="delete_property") as uow:
            prop = self._load(property_id)
            self.repository.delete(prop)
            self._evict_list_cache(uow)
        self.logger.info("property_deleted", property_id=str(property_id))

    def toggle_featured(self, property_id: UUID) -> None:
        with DjangoUnitOfWork(name="toggle_featured") as uow:
            prop = self._load(property_id)
            featured = prop.toggle_featured()
            self.repository.save(prop)
            self._evict_list_cache(uow)
        self.logger.info("property_featured_toggled", property_id=str(property_id), is_featured=featured)

    # ===== Helpers =====

    def _load_all(self) -> List[PropertyDto]:
        return assembler.to_dto_list(self.repository.find_all())

    def _load(self, property_id: UUID) -> Property:
        prop = self.repository.find_by_id(property_id)
        if prop is None:
            self.logger.info("property_not_found", property_id=str(property_id))
            raise PropertyNotFoundError(property_id)
        return prop

    def _validate_reference(self, kind: ReferenceKind, reference_id: UUID) -> None:
        exists = self.validator.exists(kind, reference_id)
        if exists is not True:
            self.logger.warning("reference_missing", kind=kind.value, reference_id=str(reference_id))
            raise ReferenceNotFoundError(kind, reference_id)

    def _evict_list_cache(self, uow: DjangoUnitOfWork) -> None:
        if self.list_cache is not None:
            uow.on_commit(self.list_cache.invalidate)


@lru_cache(maxsize=1)
def get_property_service() -> PropertyService:
    """Process-wide service wired once with the ORM repository and HTTP validator."""
    return PropertyService(
        repository=PropertyRepository(),
        validator=ServiceReferenceValidator.from_settings(),
        list_cache=PropertyListCache(),
    )
