"""Wire models for cluster replies — catalog rows, search hits, deletes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawCatalogEntry(BaseModel):
    """One row of ``GET /_cat/indices?format=json``.

    Only ``index`` is consumed by the query engine; the remaining columns
    are kept for display and diagnostics.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    index: str
    health: str | None = None
    status: str | None = None
    pri: str | None = None
    rep: str | None = None
    store_size: str | None = Field(default=None, alias="store.size")
    pri_store_size: str | None = Field(default=None, alias="pri.store.size")


class SearchHit(BaseModel):
    """A single ``hits.hits[]`` element of a ``_search`` reply."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    index: str = Field(alias="_index")
    id: str = Field(alias="_id")
    score: float | None = Field(default=None, alias="_score")
    source: dict[str, Any] = Field(default_factory=dict, alias="_source")


class SearchHits(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    hits: list[SearchHit] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """The outer ``_search`` reply; only the hit sources are used."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    hits: SearchHits = Field(default_factory=SearchHits)

    def sources(self) -> list[dict[str, Any]]:
        return [hit.source for hit in self.hits.hits]


class DeleteOutcome(BaseModel):
    """Result of a delete request as reported by the cluster."""

    model_config = ConfigDict(frozen=True)

    acknowledged: bool
    status_code: int
    indices: list[str] = Field(default_factory=list)
