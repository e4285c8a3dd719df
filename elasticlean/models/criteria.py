"""Query criteria — name and age window applied to a catalog snapshot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class QueryCriteria(BaseModel):
    """Optional filters for an index query.

    ``start`` is the newer edge of the age window (inclusive: keep
    ``age <= start``) and ``end`` the older edge (exclusive: keep
    ``age > end``), so together they select ``end < age <= start``.
    Windows with ``end >= start`` are accepted and match nothing.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    start: int | None = None
    end: int | None = None

    @property
    def is_empty_window(self) -> bool:
        """True when both edges are set and no age can satisfy them."""
        return self.start is not None and self.end is not None and self.end >= self.start

    def describe(self) -> str:
        parts = [
            f"name={self.name}" if self.name is not None else "name=*",
            f"start={self.start}" if self.start is not None else "start=-",
            f"end={self.end}" if self.end is not None else "end=-",
        ]
        return " ".join(parts)
