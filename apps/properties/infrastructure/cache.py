"""Caching of the unfiltered property listing."""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from django.conf import settings  # type: ignore
from django.core.cache import cache  # type: ignore

T = TypeVar("T")

ALL_PROPERTIES_KEY = "properties:all"


class PropertyListCache:
    """Holds the list-all result; any write evicts it. Off unless enabled in settings."""

    def __init__(self, key: str = ALL_PROPERTIES_KEY, backend=None) -> None:
        self.key = key
        self._backend = backend

    @property
    def backend(self):
        return self._backend if self._backend is not None else cache

    @staticmethod
    def is_enabled() -> bool:
        return getattr(settings, "PROPERTY_LIST_CACHE_ENABLED", False)

    def get_or_build(self, builder: Callable[[], List[T]]) -> List[T]:
        if not self.is_enabled():
            return builder()

        cached: Optional[List[T]] = self.backend.get(self.key)
        if cached is not None:
            return cached

        result = builder()
        timeout = getattr(settings, "PROPERTY_LIST_CACHE_TIMEOUT", 60)
        self.backend.set(self.key, result, timeout)
        return result

    def invalidate(self) -> None:
        self.backend.delete(self.key)


__all__ = ["PropertyListCache", "ALL_PROPERTIES_KEY"]
