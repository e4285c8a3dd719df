"""Parser for dated index names of the form ``name-YYYY.MM.DD``.

Grammar
-------
::

    index := base "-" date
    base  := any non-empty text, may itself contain "-"
    date  := year "." month "." day
    year  := 4 digits
    month := 2 digits, 01-12
    day   := 2 digits, 01-31

The date segment is always the *last* ``-YYYY.MM.DD`` token of the input;
everything before it belongs to ``base``, so ``foo-1.2.3-2018.02.04`` has
base ``foo-1.2.3``.  Day-of-month validity (e.g. Feb 30) is checked when
the calendar date is built, one step after the grammar matched, and is
still reported as a parse failure.

``IdentifierParser.parse`` never raises for malformed input.  It returns a
``ParseResult`` that is either successful or tagged with a
``ParseFailureCause``.  ``parse_identifier`` is the raising variant for
callers that need exactly one identifier.
"""

from __future__ import annotations

import datetime as dt
import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

from elasticlean.errors import IdentifierParseError
from elasticlean.models.identifier import Identifier

# Greedy base + anchored tail gives longest-trailing-match semantics.
_INDEX_PATTERN = re.compile(
    r"(?P<base>.*)-(?P<year>[0-9]{4})\.(?P<month>[0-9]{2})\.(?P<day>[0-9]{2})",
    re.DOTALL,
)


class ParseFailureCause(str, Enum):
    """Why a catalog string was rejected."""

    MISSING_DATE_SEGMENT = "missing_date_segment"
    EMPTY_NAME = "empty_name"
    MONTH_OUT_OF_RANGE = "month_out_of_range"
    DAY_OUT_OF_RANGE = "day_out_of_range"
    INVALID_DATE = "invalid_date"


class ParseResult(BaseModel):
    """Tagged outcome of parsing one catalog string.

    Exactly one of ``identifier`` and ``cause`` is set.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    identifier: Identifier | None = None
    cause: ParseFailureCause | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.identifier is not None

    def unwrap(self) -> Identifier:
        """Return the identifier or raise ``IdentifierParseError``."""
        if self.identifier is None:
            raise IdentifierParseError(
                self.raw,
                self.cause or ParseFailureCause.MISSING_DATE_SEGMENT,
                self.detail,
            )
        return self.identifier

    @classmethod
    def success(cls, raw: str, identifier: Identifier) -> ParseResult:
        return cls(raw=raw, identifier=identifier)

    @classmethod
    def failure(cls, raw: str, cause: ParseFailureCause, detail: str = "") -> ParseResult:
        return cls(raw=raw, cause=cause, detail=detail)


class IdentifierParser:
    """Stateless parser turning catalog strings into ``Identifier`` values."""

    def parse(self, raw: str) -> ParseResult:
        """Parse *raw*, returning a successful or failed ``ParseResult``."""
        match = _INDEX_PATTERN.fullmatch(raw)
        if match is None:
            return ParseResult.failure(
                raw, ParseFailureCause.MISSING_DATE_SEGMENT, "no trailing -YYYY.MM.DD segment"
            )

        base = match.group("base")
        if not base:
            return ParseResult.failure(raw, ParseFailureCause.EMPTY_NAME, "nothing precedes the date")

        year = int(match.group("year"))
        month = int(match.group("month"))
        day = int(match.group("day"))

        if not 1 <= month <= 12:
            return ParseResult.failure(raw, ParseFailureCause.MONTH_OUT_OF_RANGE, f"month={month:02d}")
        if not 1 <= day <= 31:
            return ParseResult.failure(raw, ParseFailureCause.DAY_OUT_OF_RANGE, f"day={day:02d}")

        try:
            date = dt.date(year, month, day)
        except ValueError as exc:
            return ParseResult.failure(raw, ParseFailureCause.INVALID_DATE, str(exc))

        return ParseResult.success(raw, Identifier(name=base, date=date))


_DEFAULT_PARSER = IdentifierParser()


def parse(raw: str) -> ParseResult:
    """Module-level shortcut for ``IdentifierParser().parse``."""
    return _DEFAULT_PARSER.parse(raw)


def parse_identifier(raw: str) -> Identifier:
    """Parse exactly one identifier, raising ``IdentifierParseError`` on failure."""
    return _DEFAULT_PARSER.parse(raw).unwrap()
