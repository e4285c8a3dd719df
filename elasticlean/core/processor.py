"""Index processor — the command-level coordinator.

The processor wires the transport, the age filter engine, the retention
guard and the family registry together and exposes one method per CLI
command.  It holds no state between calls: every method reads a fresh
catalog snapshot from the transport.
"""

from __future__ import annotations

import logging
from typing import Any

from elasticlean.bridge.transport import CatalogTransport, ElasticTransport
from elasticlean.config import ElasticleanConfig
from elasticlean.core.age_filter import AgeFilterEngine
from elasticlean.core.fetcher import TypedFetcher
from elasticlean.core.retention import RetentionGuard
from elasticlean.families.registry import FamilyRegistry, default_registry
from elasticlean.models.criteria import QueryCriteria
from elasticlean.models.identifier import Identifier
from elasticlean.models.reports import DeleteReport

logger = logging.getLogger(__name__)


class IndexProcessor:
    """Executes query, process and delete commands.

    Parameters
    ----------
    config:
        Loaded configuration; supplies the retention floor and, when no
        transport is given, the cluster endpoint.
    transport:
        Cluster access.  Built from *config* when omitted.
    registry:
        Known index families.  Defaults to ``default_registry()``.
    engine:
        Age filter engine.  Tests pass one with a fixed clock.
    """

    def __init__(
        self,
        config: ElasticleanConfig,
        transport: CatalogTransport | None = None,
        *,
        registry: FamilyRegistry | None = None,
        engine: AgeFilterEngine | None = None,
    ) -> None:
        self.config = config
        self.transport = transport or ElasticTransport.from_config(config)
        self.engine = engine or AgeFilterEngine()
        self.guard = RetentionGuard(config.min_days)
        self.registry = registry or default_registry()
        self.fetcher = TypedFetcher(self.engine, self.transport)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def catalog(self) -> list[str]:
        """Raw index names from the live catalog."""
        return [entry.index for entry in self.transport.list_catalog()]

    def get_indices(
        self, name: str | None = None, start: int | None = None, end: int | None = None
    ) -> list[Identifier]:
        """Matching identifiers, unordered."""
        return self.engine.filter(self.catalog(), QueryCriteria(name=name, start=start, end=end))

    def query(
        self, name: str | None = None, start: int | None = None, end: int | None = None
    ) -> list[Identifier]:
        """Matching identifiers sorted by name, then date."""
        return self.engine.sorted_matches(
            self.catalog(), QueryCriteria(name=name, start=start, end=end)
        )

    def query_names(
        self, name: str | None = None, start: int | None = None, end: int | None = None
    ) -> list[str]:
        """Distinct base names of the matching identifiers."""
        return self.engine.unique_names(
            self.catalog(), QueryCriteria(name=name, start=start, end=end)
        )

    # ------------------------------------------------------------------
    # Typed retrieval
    # ------------------------------------------------------------------

    def process(
        self, family_name: str, start: int | None = None, end: int | None = None
    ) -> list[Any]:
        """Decoded documents of the named family.

        Raises
        ------
        UnknownFamilyError
            If *family_name* is not registered.
        """
        family = self.registry.resolve(family_name)
        return self.fetcher.fetch(family, start, end)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(
        self, name: str, start: int | None, end: int, *, dry_run: bool = False
    ) -> DeleteReport:
        """Select indices older than the clamped *end* and delete them.

        With *dry_run* the transport's delete is never called.  An empty
        selection is reported without contacting the cluster either.
        """
        effective_end = self.guard.clamp(end)
        criteria = QueryCriteria(name=name, start=start, end=effective_end)
        selected = self.engine.sorted_matches(self.catalog(), criteria)

        outcome = None
        if dry_run:
            logger.info("Dry run: %d indices would be deleted", len(selected))
        elif not selected:
            logger.info("Nothing to delete for %s", criteria.describe())
        else:
            outcome = self.transport.delete(selected)
            logger.info("Delete results: %s", outcome.model_dump())

        return DeleteReport(
            name=name,
            start=start,
            requested_end=end,
            effective_end=effective_end,
            dry_run=dry_run,
            indices=selected,
            outcome=outcome,
        )

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()
