"""Report models returned by orchestration commands."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from elasticlean.models.catalog import DeleteOutcome
from elasticlean.models.identifier import Identifier


class DeleteReport(BaseModel):
    """What a delete command selected and, unless dry-run, what happened.

    ``effective_end`` is the end bound after the retention floor was
    applied; it is the value that actually selected ``indices``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    start: int | None = None
    requested_end: int
    effective_end: int
    dry_run: bool
    indices: list[Identifier] = Field(default_factory=list)
    outcome: DeleteOutcome | None = None

    @property
    def count(self) -> int:
        return len(self.indices)

    @property
    def was_clamped(self) -> bool:
        return self.effective_end != self.requested_end

    def joined(self) -> str:
        """Comma-joined canonical names, in selection order."""
        return ",".join(str(i) for i in self.indices)
