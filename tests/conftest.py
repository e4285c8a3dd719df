"""Shared test fixtures for elasticlean."""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Sequence
from typing import Any

import pytest

from elasticlean.config import ElasticleanConfig, load_config
from elasticlean.core.age_filter import AgeFilterEngine
from elasticlean.core.processor import IndexProcessor
from elasticlean.models.catalog import DeleteOutcome, RawCatalogEntry
from elasticlean.models.identifier import Identifier

# Every age in the suite is measured against this date.
TODAY = dt.date(2024, 3, 1)


class RecordingTransport:
    """Substitute ``CatalogTransport`` that records every call."""

    def __init__(
        self,
        names: Sequence[str] = (),
        records: Sequence[dict[str, Any]] = (),
        *,
        acknowledged: bool = True,
    ) -> None:
        self.names = list(names)
        self.records = list(records)
        self.acknowledged = acknowledged
        self.calls: list[tuple[Any, ...]] = []

    def list_catalog(self) -> list[RawCatalogEntry]:
        self.calls.append(("list_catalog",))
        return [RawCatalogEntry(index=n) for n in self.names]

    def fetch_typed(
        self, identifiers: Sequence[Identifier], family_name: str
    ) -> list[dict[str, Any]]:
        self.calls.append(("fetch_typed", [str(i) for i in identifiers], family_name))
        return list(self.records)

    def delete(self, identifiers: Sequence[Identifier]) -> DeleteOutcome:
        names = [str(i) for i in identifiers]
        self.calls.append(("delete", names))
        return DeleteOutcome(
            acknowledged=self.acknowledged,
            status_code=200,
            indices=names,
        )

    def calls_to(self, method: str) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == method]


@pytest.fixture
def today() -> dt.date:
    """The fixed 'today' used by engines built in tests."""
    return TODAY


@pytest.fixture
def dated() -> Callable[[str, int], str]:
    """Factory fixture: index name for *name* that is *age* days old."""

    def _factory(name: str, age: int) -> str:
        return f"{name}-{(TODAY - dt.timedelta(days=age)).strftime('%Y.%m.%d')}"

    return _factory


@pytest.fixture
def engine() -> AgeFilterEngine:
    """An AgeFilterEngine pinned to TODAY."""
    return AgeFilterEngine(clock=lambda: TODAY)


@pytest.fixture
def config() -> ElasticleanConfig:
    """A complete configuration with a 10 day retention floor."""
    return load_config(_env_file=None, host="es.test", port=9200, min_days=10)


@pytest.fixture
def catalog(dated: Callable[[str, int], str]) -> list[str]:
    """A noisy catalog: dated indices for two bases plus system entries."""
    return [
        dated("app", 0),
        dated("app", 5),
        dated("app", 6),
        dated("app", 11),
        dated("app", 40),
        dated("web-1.2.3", 3),
        dated("web-1.2.3", 30),
        ".kibana",
        ".security-7",
        "logstash",
        "broken-2018.13.01",
    ]


@pytest.fixture
def transport(catalog: list[str]) -> RecordingTransport:
    return RecordingTransport(catalog)


@pytest.fixture
def processor(
    config: ElasticleanConfig, transport: RecordingTransport, engine: AgeFilterEngine
) -> IndexProcessor:
    """An IndexProcessor wired to the recording transport and fixed clock."""
    return IndexProcessor(config, transport, engine=engine)


@pytest.fixture
def deprecate_record() -> dict[str, Any]:
    """A ``_source`` record of the deprecate family."""
    return {
        "callee": "old_api",
        "label": "deprecation",
        "env.DD_LOCATION": "van",
        "env.DD_ROLE": "lighting",
        "env.DD_SHOW": "abc",
        "env.DD_SEQ": "010",
        "env.DD_SHOT": "0020",
        "logger.callstack": "File tool.py, line 3",
        "logger.message": "old_api is deprecated",
        "logger.user": "jdoe",
    }


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory fixture: build a RecordingTransport over the given names."""

    def _factory(names: Sequence[str] = (), records: Sequence[dict[str, Any]] = (), **kwargs: Any):
        return RecordingTransport(names, records, **kwargs)

    return _factory
