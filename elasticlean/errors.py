"""Error hierarchy for elasticlean.

Every failure the CLI reports derives from ``ElasticleanError`` so the
command layer can render it uniformly and exit non-zero.  Bulk catalog
filtering never raises ``IdentifierParseError``; it is reserved for paths
that build a single identifier on purpose.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from elasticlean.core.parser import ParseFailureCause


class ElasticleanError(Exception):
    """Base class for all elasticlean errors."""


class IdentifierParseError(ElasticleanError, ValueError):
    """Raised when a single index name cannot be turned into an Identifier."""

    def __init__(self, raw: str, cause: ParseFailureCause, detail: str = "") -> None:
        self.raw = raw
        self.cause = cause
        self.detail = detail
        message = f"failed to parse {raw!r}: {cause.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnknownFamilyError(ElasticleanError, LookupError):
    """Raised when an operator names an index family nobody registered."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        self.name = name
        self.known = list(known or [])
        message = f"Unrecognized index family: {name!r}"
        if self.known:
            message = f"{message} (known: {', '.join(self.known)})"
        super().__init__(message)


class TransportError(ElasticleanError, RuntimeError):
    """Raised when talking to the cluster fails or its reply cannot be decoded."""


class ConfigurationMissingError(ElasticleanError, RuntimeError):
    """Raised at startup when required settings are absent or invalid.

    The process must not proceed past this error.
    """

    def __init__(self, missing: list[str], detail: str = "") -> None:
        self.missing = list(missing)
        message = "Missing or invalid configuration: " + ", ".join(self.missing)
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
