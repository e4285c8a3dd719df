"""elasticlean data models — all Pydantic v2, all frozen (immutable)."""

from elasticlean.models.catalog import (
    DeleteOutcome,
    RawCatalogEntry,
    SearchHit,
    SearchResponse,
)
from elasticlean.models.criteria import QueryCriteria
from elasticlean.models.identifier import Identifier
from elasticlean.models.reports import DeleteReport

__all__ = [
    # identifiers
    "Identifier",
    "QueryCriteria",
    # wire
    "RawCatalogEntry",
    "SearchHit",
    "SearchResponse",
    "DeleteOutcome",
    # reports
    "DeleteReport",
]
