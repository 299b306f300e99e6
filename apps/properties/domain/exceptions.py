"""Errors raised by the property use cases."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ReferenceKind(Enum):
    """Entities owned by peer services that a listing points at."""

    AGENT = "agent"
    CITY = "city"
    PROPERTY_TYPE = "property_type"

    @property
    def label(self) -> str:
        return {
            ReferenceKind.AGENT: "Agent",
            ReferenceKind.CITY: "City",
            ReferenceKind.PROPERTY_TYPE: "Property type",
        }[self]


class PropertyServiceError(Exception):
    """Base class for every error raised by the property service."""


class PropertyNotFoundError(PropertyServiceError):
    """Raised when no listing exists for the requested identifier."""

    def __init__(self, property_id: Any) -> None:
        self.property_id = property_id
        super().__init__(f"Property not found with id: {property_id}")


class ReferenceNotFoundError(PropertyServiceError):
    """Raised when a peer service reports that a referenced id does not exist."""

    def __init__(self, kind: ReferenceKind, reference_id: Any) -> None:
        self.kind = kind
        self.reference_id = reference_id
        super().__init__(f"{kind.label} not found with id: {reference_id}")


class UpstreamUnavailableError(PropertyServiceError):
    """Raised when a peer service could not answer an existence check."""

    def __init__(self, kind: ReferenceKind, reference_id: Any, reason: str = "") -> None:
        self.kind = kind
        self.reference_id = reference_id
        message = f"{kind.label} service unavailable while checking id: {reference_id}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
