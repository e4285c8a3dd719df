"""Transport bridge — HTTP access to the Elasticsearch cluster.

Bridge boundary
---------------
The query engine only ever sees raw index names.  Everything that touches
the network lives here behind the ``CatalogTransport`` protocol, so
orchestration code and tests can swap in a substitute that records calls
instead of talking to a cluster.

``ElasticTransport`` is the concrete adapter, built on ``httpx.Client``:

* ``GET  /_cat/indices?format=json``  — catalog listing
* ``GET  /{indices}/_search``         — typed document retrieval
* ``DELETE /{indices}``               — index deletion

Every network, status or decode failure is raised as ``TransportError``
with the underlying error text.  There is no retry.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

import httpx
from pydantic import TypeAdapter, ValidationError

from elasticlean.config import ElasticleanConfig
from elasticlean.errors import TransportError
from elasticlean.models.catalog import DeleteOutcome, RawCatalogEntry, SearchResponse
from elasticlean.models.identifier import Identifier

logger = logging.getLogger(__name__)

_CATALOG_ADAPTER = TypeAdapter(list[RawCatalogEntry])


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class CatalogTransport(Protocol):
    """What the core needs from the cluster."""

    def list_catalog(self) -> list[RawCatalogEntry]:
        """One entry per live index."""
        ...

    def fetch_typed(
        self, identifiers: Sequence[Identifier], family_name: str
    ) -> list[dict[str, Any]]:
        """Raw ``_source`` records stored in *identifiers*."""
        ...

    def delete(self, identifiers: Sequence[Identifier]) -> DeleteOutcome:
        """Delete *identifiers* and report the cluster's answer."""
        ...


def join_indices(identifiers: Sequence[Identifier]) -> str:
    """Comma-joined canonical names, as used in multi-index URL paths."""
    return ",".join(str(i) for i in identifiers)


# ---------------------------------------------------------------------------
# HTTP implementation
# ---------------------------------------------------------------------------


class ElasticTransport:
    """``CatalogTransport`` over HTTP.

    Parameters
    ----------
    base_url:
        Cluster root, e.g. ``http://es-client-01:9200``.
    timeout_seconds:
        Per-request timeout handed to httpx.
    client:
        Pre-built ``httpx.Client``; tests pass one wired to
        ``httpx.MockTransport``.  When given, ``base_url`` is still used to
        build routes.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_seconds)

    @classmethod
    def from_config(cls, config: ElasticleanConfig, **kwargs: Any) -> ElasticTransport:
        return cls(config.base_url, timeout_seconds=config.timeout_seconds, **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_catalog(self) -> list[RawCatalogEntry]:
        """Retrieve the live index list."""
        body = self._request("GET", "_cat/indices", params={"format": "json"})
        try:
            entries = _CATALOG_ADAPTER.validate_python(body)
        except ValidationError as exc:
            raise TransportError(f"unable to decode catalog listing: {exc}") from exc
        logger.debug("Catalog listing returned %d entries", len(entries))
        return entries

    def fetch_typed(
        self,
        identifiers: Sequence[Identifier],
        family_name: str,
        *,
        size: int | None = None,
    ) -> list[dict[str, Any]]:
        """Search *identifiers* and return every hit's ``_source``.

        Without *size* the cluster applies its own page size (10 hits by
        default), so large families come back truncated.  Pass *size* to
        request a larger page; no scrolling is performed.
        """
        if not identifiers:
            raise ValueError("fetch_typed requires at least one identifier")
        route = f"{join_indices(identifiers)}/_search"
        logger.info("Fetching %s documents from %d indices", family_name, len(identifiers))
        params = {"size": size} if size is not None else None
        body = self._request("GET", route, params=params)
        try:
            response = SearchResponse.model_validate(body)
        except ValidationError as exc:
            raise TransportError(f"unable to decode search reply: {exc}") from exc
        return response.sources()

    def delete(self, identifiers: Sequence[Identifier]) -> DeleteOutcome:
        """Delete *identifiers* in one request."""
        if not identifiers:
            raise ValueError("delete requires at least one identifier")
        route = join_indices(identifiers)
        response = self._send("DELETE", route)
        try:
            body = response.json()
        except ValueError:
            body = {}
        acknowledged = bool(body.get("acknowledged", False)) if isinstance(body, dict) else False
        outcome = DeleteOutcome(
            acknowledged=acknowledged,
            status_code=response.status_code,
            indices=[str(i) for i in identifiers],
        )
        logger.info(
            "Delete of %d indices returned %d (acknowledged=%s)",
            len(identifiers),
            response.status_code,
            acknowledged,
        )
        return outcome

    def close(self) -> None:
        """Release the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> ElasticTransport:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ElasticTransport(base_url={self._base_url!r})"

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _route(self, resource: str) -> str:
        return f"{self._base_url}/{resource}"

    def _send(self, method: str, resource: str, **kwargs: Any) -> httpx.Response:
        url = self._route(resource)
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        return response

    def _request(self, method: str, resource: str, **kwargs: Any) -> Any:
        response = self._send(method, resource, **kwargs)
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"unable to deserialize reply from {method} {response.url}: {exc}"
            ) from exc
