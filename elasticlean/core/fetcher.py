"""Typed fetcher — retrieves decoded documents for one index family."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from elasticlean.bridge.transport import CatalogTransport
from elasticlean.core.age_filter import AgeFilterEngine
from elasticlean.errors import TransportError
from elasticlean.families.registry import IndexFamily
from elasticlean.models.criteria import QueryCriteria
from elasticlean.models.identifier import Identifier

logger = logging.getLogger(__name__)


class TypedFetcher:
    """Select a family's indices and hand them to the transport for retrieval.

    The fetcher's own contribution is choosing and ordering the identifier
    subset; fetching and decoding the payload is delegated.
    """

    def __init__(self, engine: AgeFilterEngine, transport: CatalogTransport) -> None:
        self._engine = engine
        self._transport = transport

    def select(
        self, family: IndexFamily, start: int | None = None, end: int | None = None
    ) -> list[Identifier]:
        """Sorted identifiers of *family* inside the age window."""
        catalog = [entry.index for entry in self._transport.list_catalog()]
        criteria = QueryCriteria(name=family.name, start=start, end=end)
        return self._engine.sorted_matches(catalog, criteria)

    def fetch(
        self, family: IndexFamily, start: int | None = None, end: int | None = None
    ) -> list[Any]:
        """Decoded documents for *family*, in index order.

        Raises
        ------
        TransportError
            If retrieval fails or a record does not decode.
        """
        identifiers = self.select(family, start, end)
        if not identifiers:
            logger.info("No %s indices in the requested window", family.name)
            return []

        records = self._transport.fetch_typed(identifiers, family.name)
        try:
            documents = [family.decode(record) for record in records]
        except ValidationError as exc:
            raise TransportError(
                f"unable to decode {family.name} record: {exc}"
            ) from exc
        logger.info(
            "Fetched %d %s documents from %d indices",
            len(documents),
            family.name,
            len(identifiers),
        )
        return documents
