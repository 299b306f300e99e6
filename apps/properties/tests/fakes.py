"""Test doubles for the property use cases."""

from __future__ import annotations

import copy
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from apps.properties.domain.entities import Property


class StubValidator:
    """Answers existence checks from a set of ids known to be missing."""

    def __init__(self, missing=(), error: Optional[Exception] = None):
        self.missing = set(missing)
        self.error = error
        self.calls: List[tuple] = []

    def exists(self, kind, reference_id) -> bool:
        self.calls.append((kind, reference_id))
        if self.error is not None:
            raise self.error
        return reference_id not in self.missing

    def fetch(self, kind, reference_id):
        return None


class InMemoryPropertyRepository:
    """Dict-backed repository that hands out copies, like a real store would."""

    def __init__(self):
        self.rows: Dict[UUID, Property] = {}
        self.save_calls = 0
        self.find_all_calls = 0

    def find_all(self) -> List[Property]:
        self.find_all_calls += 1
        return [copy.deepcopy(prop) for prop in self.rows.values()]

    def find_by_id(self, property_id) -> Optional[Property]:
        prop = self.rows.get(property_id)
        return copy.deepcopy(prop) if prop is not None else None

    def find_by_agent_id(self, agent_id) -> List[Property]:
        return [copy.deepcopy(p) for p in self.rows.values() if p.agent_id == agent_id]

    def find_by_city_id(self, city_id) -> List[Property]:
        return [copy.deepcopy(p) for p in self.rows.values() if p.city_id == city_id]

    def find_by_featured_true(self) -> List[Property]:
        return [copy.deepcopy(p) for p in self.rows.values() if p.is_featured]

    def search(self, text=None, city_id=None, property_type_id=None, max_price=None) -> List[Property]:
        found = []
        for prop in self.rows.values():
            if text and text.lower() not in f"{prop.title} {prop.description or ''}".lower():
                continue
            if city_id is not None and prop.city_id != city_id:
                continue
            if property_type_id is not None and prop.property_type_id != property_type_id:
                continue
            if max_price is not None and prop.price > Decimal(max_price):
                continue
            found.append(copy.deepcopy(prop))
        return found

    def save(self, prop: Property) -> Property:
        self.save_calls += 1
        now = datetime.now(timezone.utc)
        if prop.id is None:
            prop.id = uuid.uuid4()
            prop.created_at = now
        prop.updated_at = now
        for child in [*prop.images, *prop.features]:
            if child.id is None:
                child.id = uuid.uuid4()
        self.rows[prop.id] = copy.deepcopy(prop)
        return copy.deepcopy(prop)

    def delete(self, prop: Property) -> None:
        self.rows.pop(prop.id, None)
