"""Unit tests for the testing fakes and generators."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta

import pytest
from hypothesis import given

from shadow_tx.application.collector import FifoEventCollector
from shadow_tx.application.commands import BaseCommand, CommandContext
from shadow_tx.kernel.events import Event
from shadow_tx.testing import (
    AllowListAuthorizer,
    CallRecorder,
    FakeMetricsRegistry,
    FrozenClock,
    RequiredFieldsValidator,
    event_strategy,
    event_type_strategy,
    payload_strategy,
)


class Noop(BaseCommand):
    async def invoke(self, context: CommandContext) -> None:
        pass


class TestFakeMetricsRegistry:
    def test_counter_tracks_totals_and_labels(self) -> None:
        metrics = FakeMetricsRegistry()
        counter = metrics.counter("hits")
        counter.add()
        counter.add(2.0, {"event_type": "A"})
        assert metrics.counter("hits") is counter
        assert counter.total == 3.0
        assert counter.labels == [None, {"event_type": "A"}]
        metrics.assert_counter_incremented("hits", 2)

    def test_assert_fails_for_unknown_counter(self) -> None:
        with pytest.raises(AssertionError, match="never created"):
            FakeMetricsRegistry().assert_counter_incremented("missing")

    def test_histogram_and_reset(self) -> None:
        metrics = FakeMetricsRegistry()
        metrics.histogram("sizes").record(1.5)
        assert metrics.histogram("sizes").values == [1.5]
        metrics.reset()
        assert metrics.histogram("sizes").values == []


class TestAllowListAuthorizer:
    def test_allow_and_deny(self) -> None:
        auth = AllowListAuthorizer({"web": ["A"]})
        auth.allow("cron", "B", "C")
        assert auth.check_authorization("web", "A") is True
        assert auth.check_authorization("web", "B") is False
        assert auth.check_authorization("cron", "C") is True
        assert auth.check_authorization("unknown", "A") is False
        assert len(auth.checks) == 4


class TestRequiredFieldsValidator:
    @pytest.mark.parametrize("empty", [None, "", [], {}])
    def test_empty_values_rejected(self, empty: object) -> None:
        validator = RequiredFieldsValidator({"A": ["x"]})
        assert validator.validate("A", {"x": empty}) is False

    def test_zero_and_false_are_present(self) -> None:
        validator = RequiredFieldsValidator({"A": ["n", "flag"]})
        assert validator.validate("A", {"n": 0, "flag": False}) is True

    def test_types_without_rules_pass(self) -> None:
        assert RequiredFieldsValidator().validate("ANY", {}) is True


class TestCallRecorder:
    def test_records_and_fails_on_demand(self) -> None:
        calls = CallRecorder()
        ok = calls.hook("ok", delay=0.001)
        bad = calls.hook("bad", fail_with=KeyError("k"))
        event = Event.create("A")
        command = Noop(event)
        context = CommandContext(event=event, event_collector=FifoEventCollector())

        asyncio.run(ok.run(command, context))
        with pytest.raises(KeyError):
            asyncio.run(bad.run(command, context))

        assert calls.names == ["ok", "bad"]
        assert calls.count("ok") == 1
        assert calls.calls[0].command_id == command.command_id
        calls.clear()
        assert calls.calls == []


class TestFrozenClock:
    def test_stamps_events_deterministically(self) -> None:
        clock = FrozenClock(datetime(2024, 1, 1, tzinfo=UTC))
        first = Event.create("A", clock=clock)
        clock.advance(seconds=5)
        second = Event.caused_by(first, "B", clock=clock)
        assert second.metadata.timestamp - first.metadata.timestamp == timedelta(seconds=5)


class TestStrategies:
    @given(event_type_strategy())
    def test_event_types_are_upper_snake(self, event_type: str) -> None:
        assert event_type and all(c.isupper() or c == "_" for c in event_type)

    @given(payload_strategy())
    def test_payload_keys_are_strings(self, payload: dict[str, object]) -> None:
        assert all(isinstance(k, str) and k for k in payload)

    @given(event_strategy("PING"))
    def test_pinned_event_type(self, event: Event) -> None:
        assert event.type == "PING"
        assert event.is_root
        assert event.correlation_id


class TestCounterLabels:
    def test_total_for_filters_by_label(self) -> None:
        counter = FakeMetricsRegistry().counter("command.executions")
        counter.add(1, {"event_type": "A"})
        counter.add(2, {"event_type": "B"})
        counter.add(3)
        assert counter.total_for(event_type="A") == 1
        assert counter.total_for(event_type="B") == 2
        assert counter.total == 6
