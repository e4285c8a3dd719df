"""Family registry — maps an index base name to a payload decoder.

A *family* is the set of dated indices sharing one base name whose
documents decode into a known type.  The registry is built once at
startup; the ``process`` command resolves an operator-supplied name
against it and reports unknown names instead of guessing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from elasticlean.errors import UnknownFamilyError

logger = logging.getLogger(__name__)

Decoder = Callable[[Mapping[str, Any]], Any]


class IndexDocument(BaseModel):
    """Base for typed documents stored in a family's indices.

    Subclasses set ``index_name`` to the family's base name.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    index_name: ClassVar[str] = ""

    @classmethod
    def decode(cls, record: Mapping[str, Any]) -> IndexDocument:
        """Decode one ``_source`` record into this document type."""
        return cls.model_validate(dict(record))

    def render(self) -> str:
        """Human-readable rendering used by the ``process`` command."""
        return str(self)


class IndexFamily(BaseModel):
    """A registered family: its base name and how to decode its records."""

    model_config = ConfigDict(frozen=True)

    name: str
    decoder: Decoder
    description: str = ""

    def decode(self, record: Mapping[str, Any]) -> Any:
        return self.decoder(record)


class FamilyRegistry:
    """In-memory registry of known index families."""

    def __init__(self) -> None:
        self._families: dict[str, IndexFamily] = {}

    def register(self, name: str, decoder: Decoder, description: str = "") -> IndexFamily:
        """Register *decoder* under *name*.

        Raises
        ------
        ValueError
            If *name* is empty or already registered.
        """
        if not name:
            raise ValueError("Family name must be non-empty")
        if name in self._families:
            raise ValueError(f"Family {name!r} is already registered")
        family = IndexFamily(name=name, decoder=decoder, description=description)
        self._families[name] = family
        logger.debug("Registered index family %s", name)
        return family

    def register_document(self, document_cls: type[IndexDocument]) -> IndexFamily:
        """Register a document class under its declared ``index_name``."""
        doc = (document_cls.__doc__ or "").strip().splitlines()
        return self.register(
            document_cls.index_name,
            document_cls.decode,
            description=doc[0] if doc else "",
        )

    def resolve(self, name: str) -> IndexFamily:
        """Look up a family by name, raising ``UnknownFamilyError`` if absent."""
        family = self._families.get(name)
        if family is None:
            raise UnknownFamilyError(name, self.names())
        return family

    def names(self) -> list[str]:
        return sorted(self._families)

    def families(self) -> list[IndexFamily]:
        return [self._families[n] for n in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._families

    def __len__(self) -> int:
        return len(self._families)


def default_registry() -> FamilyRegistry:
    """A fresh registry holding the built-in families."""
    from elasticlean.families.deprecate import Deprecate

    registry = FamilyRegistry()
    registry.register_document(Deprecate)
    return registry
