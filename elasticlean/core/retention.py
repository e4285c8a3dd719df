"""Retention guard — the deployment-wide floor on what may be deleted.

``min_days`` is a safety floor, not a default: whatever end bound an
operator asks for, a delete only ever selects indices strictly older than
``max(requested_end, min_days)`` days.  The guard runs before the delete
set is computed, and the clamped value is the one that builds the query.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def clamp_end(requested_end: int, minimum_days: int) -> int:
    """Return *requested_end* if it exceeds *minimum_days*, else *minimum_days*."""
    return requested_end if requested_end > minimum_days else minimum_days


class RetentionGuard:
    """Applies the retention floor to delete requests.

    Parameters
    ----------
    minimum_days:
        The configured floor.  Must be non-negative.
    """

    def __init__(self, minimum_days: int) -> None:
        if minimum_days < 0:
            raise ValueError(f"minimum_days must be >= 0, got {minimum_days}")
        self._minimum_days = minimum_days

    @property
    def minimum_days(self) -> int:
        return self._minimum_days

    def clamp(self, requested_end: int) -> int:
        """Clamp *requested_end* to the floor, logging when it moves."""
        effective = clamp_end(requested_end, self._minimum_days)
        if effective != requested_end:
            logger.debug(
                "Requested end %d falls within the retention floor; using %d",
                requested_end,
                effective,
            )
        return effective
