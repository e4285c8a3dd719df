"""Adversarial tests for the retention floor.

No combination of operator input may select an index younger than the
configured minimum for deletion.
"""

from __future__ import annotations

import pytest

from elasticlean.config import load_config
from elasticlean.core.processor import IndexProcessor


@pytest.fixture
def young_and_old(dated) -> list[str]:
    """One index per age from 0 to 30 days, all under one name."""
    return [dated("logs", age) for age in range(0, 31)]


@pytest.fixture
def guarded(config, engine, make_transport, young_and_old) -> IndexProcessor:
    return IndexProcessor(config, make_transport(young_and_old), engine=engine)


class TestRetentionFloorCannotBeBypassed:
    @pytest.mark.parametrize("end", [-1000, -1, 0, 1, 5, 9, 10])
    def test_low_end_values_clamped(self, guarded: IndexProcessor, today, end: int):
        report = guarded.delete("logs", None, end)
        assert report.effective_end == 10
        assert report.indices
        assert all(i.age_days(today) > 10 for i in report.indices)

    @pytest.mark.parametrize("start", [None, 0, 5, 11, 1000])
    def test_start_cannot_widen_window(self, guarded: IndexProcessor, today, start):
        report = guarded.delete("logs", start, 0)
        assert all(i.age_days(today) > 10 for i in report.indices)

    def test_transport_only_sees_old_indices(self, guarded: IndexProcessor, today):
        guarded.delete("logs", None, -5)
        (call,) = guarded.transport.calls_to("delete")
        ages = [guarded.engine.parse_catalog([name])[0].age_days(today) for name in call[1]]
        assert min(ages) == 11

    def test_future_dated_indices_never_selected(self, config, engine, make_transport, dated):
        processor = IndexProcessor(
            config, make_transport([dated("logs", -3), dated("logs", 12)]), engine=engine
        )
        report = processor.delete("logs", None, -100)
        assert [i.age_days(engine.today()) for i in report.indices] == [12]

    def test_zero_floor_still_protects_today(self, engine, make_transport, dated):
        config = load_config(_env_file=None, host="h", port=9200, min_days=0)
        processor = IndexProcessor(
            config, make_transport([dated("logs", 0), dated("logs", 1)]), engine=engine
        )
        report = processor.delete("logs", None, -10)
        assert [i.age_days(engine.today()) for i in report.indices] == [1]
