"""Age filter engine — selects identifiers from a raw catalog snapshot.

Every query re-parses the catalog it is given; nothing is cached between
calls.  Entries that do not follow the dated naming scheme (system
indices such as ``.kibana``) are dropped without error.  Ages are
measured against a single "today" taken once per call so that one query
never straddles midnight.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable, Iterable

from elasticlean.core.parser import IdentifierParser
from elasticlean.models.criteria import QueryCriteria
from elasticlean.models.identifier import Identifier, utc_today

logger = logging.getLogger(__name__)


class AgeFilterEngine:
    """Filter, sort and de-duplicate catalog entries by name and age.

    Parameters
    ----------
    parser:
        Parser used for each catalog entry.  A fresh ``IdentifierParser``
        is used when omitted.
    clock:
        Zero-argument callable returning today's date.  Defaults to the
        current UTC date; tests inject a fixed date.
    """

    def __init__(
        self,
        parser: IdentifierParser | None = None,
        *,
        clock: Callable[[], dt.date] | None = None,
    ) -> None:
        self._parser = parser or IdentifierParser()
        self._clock = clock or utc_today

    def today(self) -> dt.date:
        return self._clock()

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_catalog(self, catalog: Iterable[str]) -> list[Identifier]:
        """Parse every entry, discarding the ones that do not conform."""
        identifiers: list[Identifier] = []
        discarded = 0
        for raw in catalog:
            result = self._parser.parse(raw)
            if result.ok:
                identifiers.append(result.unwrap())
            else:
                discarded += 1
                logger.debug("Skipping catalog entry %r: %s", raw, result.cause.value)
        if discarded:
            logger.debug("Discarded %d non-conforming catalog entries", discarded)
        return identifiers

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def filter(self, catalog: Iterable[str], criteria: QueryCriteria | None = None) -> list[Identifier]:
        """Return identifiers matching *criteria*, in no particular order.

        Applied in order: exact name match, then ``age <= start``, then
        ``age > end``.
        """
        criteria = criteria or QueryCriteria()
        if criteria.is_empty_window:
            logger.warning(
                "Age window is empty (start=%d, end=%d); no index can match",
                criteria.start,
                criteria.end,
            )

        today = self.today()
        matches = self.parse_catalog(catalog)
        if criteria.name is not None:
            matches = [i for i in matches if i.name == criteria.name]
        if criteria.start is not None:
            matches = [i for i in matches if i.days_since(today) <= criteria.start]
        if criteria.end is not None:
            matches = [i for i in matches if i.days_since(today) > criteria.end]

        logger.debug("Query %s matched %d indices", criteria.describe(), len(matches))
        return matches

    def sorted_matches(
        self, catalog: Iterable[str], criteria: QueryCriteria | None = None
    ) -> list[Identifier]:
        """Matching identifiers in ascending (name, date) order."""
        return sorted(self.filter(catalog, criteria))

    def unique_names(self, catalog: Iterable[str], criteria: QueryCriteria | None = None) -> list[str]:
        """Distinct base names among the matches, sorted."""
        return sorted({i.name for i in self.filter(catalog, criteria)})
