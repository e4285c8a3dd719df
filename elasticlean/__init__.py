"""elasticlean: inventory and retire dated Elasticsearch indices.

Index names follow ``name-YYYY.MM.DD`` (optionally ``name-V.V.V-YYYY.MM.DD``).
The package parses them into ordered identifiers, filters them by name and
age, and deletes the ones past a retention window without ever reaching
below a configured retention floor.
"""

__version__ = "0.2.0"

from elasticlean.core.age_filter import AgeFilterEngine
from elasticlean.core.parser import IdentifierParser, ParseResult
from elasticlean.core.processor import IndexProcessor
from elasticlean.core.retention import RetentionGuard, clamp_end
from elasticlean.models.criteria import QueryCriteria
from elasticlean.models.identifier import Identifier

__all__ = [
    "AgeFilterEngine",
    "Identifier",
    "IdentifierParser",
    "IndexProcessor",
    "ParseResult",
    "QueryCriteria",
    "RetentionGuard",
    "clamp_end",
    "__version__",
]
