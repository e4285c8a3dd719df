"""The ``deprecate`` family — deprecation warnings logged by pipeline tools."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from elasticlean.families.registry import IndexDocument


class Deprecate(IndexDocument):
    """Deprecation warnings emitted by studio tools."""

    index_name: ClassVar[str] = "deprecate"

    callee: str
    label: str
    location: str = Field(alias="env.DD_LOCATION")
    role: str = Field(alias="env.DD_ROLE")
    show: str | None = Field(default=None, alias="env.DD_SHOW")
    seq: str | None = Field(default=None, alias="env.DD_SEQ")
    shot: str | None = Field(default=None, alias="env.DD_SHOT")
    callstack: str = Field(alias="logger.callstack")
    message: str = Field(alias="logger.message")
    user: str = Field(alias="logger.user")

    @property
    def level(self) -> str:
        """Show/sequence/shot joined with dots, skipping unset parts."""
        return ".".join(p for p in (self.show, self.seq, self.shot) if p)

    def render(self) -> str:
        return (
            f"user: {self.user}\n"
            f"level: {self.level}\n"
            f"role: {self.role}\n"
            f"location: {self.location}\n"
            f"\nmessage:\n{self.message}\n"
            f"\ncallstack:\n{self.callstack}\n"
        )
