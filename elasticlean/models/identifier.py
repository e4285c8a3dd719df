"""Identifier model — one dated index, ``NAME-YYYY.MM.DD``."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from elasticlean.errors import IdentifierParseError


def utc_today() -> dt.date:
    """Current calendar date in UTC."""
    return dt.datetime.now(dt.timezone.utc).date()


class Identifier(BaseModel):
    """A parsed time-partitioned index: base name plus creation date.

    Identifiers are immutable and totally ordered: by ``name`` first, then
    by ``date`` ascending.  ``str(identifier)`` gives the canonical
    ``name-YYYY.MM.DD`` form that the parser accepts back.

    Examples
    --------
    >>> Identifier.parse("foo-1.2.3-2018.02.04").name
    'foo-1.2.3'
    >>> str(Identifier.from_parts("foo", 2018, 2, 4))
    'foo-2018.02.04'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    date: dt.date

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, raw: str) -> Identifier:
        """Parse a single catalog string, raising ``IdentifierParseError``."""
        from elasticlean.core.parser import parse_identifier

        return parse_identifier(raw)

    @classmethod
    def from_parts(cls, name: str, year: int, month: int, day: int) -> Identifier:
        """Build from numeric components; impossible dates are rejected."""
        from elasticlean.core.parser import ParseFailureCause

        try:
            date = dt.date(year, month, day)
        except ValueError as exc:
            raw = f"{name}-{year:04d}.{month:02d}.{day:02d}"
            raise IdentifierParseError(raw, ParseFailureCause.INVALID_DATE, str(exc)) from exc
        return cls(name=name, date=date)

    @classmethod
    def from_strs(cls, name: str, year: str, month: str, day: str) -> Identifier:
        """Build from string components such as ``("foo", "2018", "02", "04")``.

        Non-numeric components are reported as ``INVALID_DATE``.
        """
        from elasticlean.core.parser import ParseFailureCause

        try:
            parts = int(year), int(month), int(day)
        except ValueError as exc:
            raw = f"{name}-{year}.{month}.{day}"
            raise IdentifierParseError(raw, ParseFailureCause.INVALID_DATE, str(exc)) from exc
        return cls.from_parts(name, *parts)

    # ------------------------------------------------------------------
    # Age
    # ------------------------------------------------------------------

    def days_since(self, from_date: dt.date) -> int:
        """Whole days between this index's date and *from_date*.

        Negative when the index is dated after *from_date*.
        """
        if isinstance(from_date, dt.datetime):
            from_date = from_date.date()
        return (from_date - self.date).days

    def age_days(self, today: dt.date | None = None) -> int:
        """Age in days relative to *today* (UTC today when omitted)."""
        return self.days_since(today or utc_today())

    # ------------------------------------------------------------------
    # Ordering and display
    # ------------------------------------------------------------------

    def _sort_key(self) -> tuple[str, dt.date]:
        return (self.name, self.date)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        d = self.date
        return f"{self.name}-{d.year:04d}.{d.month:02d}.{d.day:02d}"
