"""
Peer service clients

HTTP clients for the agent, city and property type services, plus the
validator the property use cases call to confirm that a referenced
identifier exists. Each check is a single GET; there is no retry and no
fallback, so a transport failure aborts the enclosing write.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional
from uuid import UUID

import requests
import structlog
from django.conf import settings  # type: ignore

from apps.properties.domain.exceptions import ReferenceKind, UpstreamUnavailableError

logger = structlog.get_logger(__name__)

RESOURCE_PATHS = {
    ReferenceKind.AGENT: "/api/v1/agents",
    ReferenceKind.CITY: "/api/v1/cities",
    ReferenceKind.PROPERTY_TYPE: "/api/v1/property-types",
}

DEFAULT_TIMEOUT = 5.0


class PeerServiceClient:
    """Talks to one peer service (agents, cities or property types)."""

    def __init__(
        self,
        kind: ReferenceKind,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.kind = kind
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    def _url(self, reference_id: UUID, suffix: str = "") -> str:
        return f"{self.base_url}{RESOURCE_PATHS[self.kind]}/{reference_id}{suffix}"

    def _get(self, url: str, reference_id: UUID) -> requests.Response:
        try:
            return self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error(
                "peer_request_failed",
                kind=self.kind.value,
                reference_id=str(reference_id),
                url=url,
                error=str(exc),
            )
            raise UpstreamUnavailableError(self.kind, reference_id, str(exc)) from exc

    def exists(self, reference_id: UUID) -> bool:
        """
        Ask the peer service whether ``reference_id`` exists.

        Only a JSON ``true`` body means "exists". ``false``, ``null``, an
        empty body or anything else is reported as missing.
        """
        url = self._url(reference_id, "/exists")
        response = self._get(url, reference_id)
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            logger.error(
                "peer_request_rejected",
                kind=self.kind.value,
                reference_id=str(reference_id),
                status_code=response.status_code,
            )
            raise UpstreamUnavailableError(
                self.kind, reference_id, f"HTTP {response.status_code}"
            ) from exc

        if not response.content:
            return False
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamUnavailableError(self.kind, reference_id, "invalid JSON body") from exc

        if payload is None:
            logger.warning("peer_returned_null", kind=self.kind.value, reference_id=str(reference_id))
            return False
        return payload is True

    def fetch(self, reference_id: UUID) -> Optional[Dict]:
        """Return the peer's representation of ``reference_id`` or ``None`` on 404."""
        url = self._url(reference_id)
        response = self._get(url, reference_id)
        if response.status_code == 404:
            return None
        try:
            response.raise_for_status()
            return response.json()
        except (requests.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(self.kind, reference_id, str(exc)) from exc


class ServiceReferenceValidator:
    """Existence checks against the peer services, one call per check."""

    def __init__(self, clients: Mapping[ReferenceKind, PeerServiceClient]) -> None:
        missing = [kind.value for kind in ReferenceKind if kind not in clients]
        if missing:
            raise ValueError(f"No client configured for: {', '.join(missing)}")
        self._clients = dict(clients)

    def exists(self, kind: ReferenceKind, reference_id: UUID) -> bool:
        return self._clients[kind].exists(reference_id)

    def fetch(self, kind: ReferenceKind, reference_id: UUID) -> Optional[Dict]:
        return self._clients[kind].fetch(reference_id)

    @classmethod
    def from_settings(cls) -> "ServiceReferenceValidator":
        timeout = float(getattr(settings, "PEER_SERVICE_TIMEOUT", DEFAULT_TIMEOUT))
        urls = {
            ReferenceKind.AGENT: settings.AGENT_SERVICE_URL,
            ReferenceKind.CITY: settings.CITY_SERVICE_URL,
            ReferenceKind.PROPERTY_TYPE: settings.PROPERTY_TYPE_SERVICE_URL,
        }
        return cls({kind: PeerServiceClient(kind, url, timeout=timeout) for kind, url in urls.items()})
