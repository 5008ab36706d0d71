"""End-to-end order flow: settings, capability stacks and chained side effects.

Runs fully in-process; no external services.
"""
from __future__ import annotations

import asyncio
from typing import Any

from shadow_tx.application import (
    BaseCommand,
    CapabilityBuilder,
    CommandContext,
    FifoEventCollector,
    ProcessingStage,
    RecordingErrorObserver,
    TransactionMediator,
)
from shadow_tx.application.hooks import (
    authorization_hook,
    enrichment_hook,
    logging_hook,
    metrics_hook,
    state_hook,
    validation_hook,
)
from shadow_tx.config import EngineSettings, EnvSettingsLoader
from shadow_tx.kernel.events import Event
from shadow_tx.testing import AllowListAuthorizer, FakeMetricsRegistry, RequiredFieldsValidator


# ---------------------------------------------------------------------------
# Domain commands
# ---------------------------------------------------------------------------

class PlaceOrder(BaseCommand):
    command_prefix = "place-order"

    async def invoke(self, context: CommandContext) -> None:
        total = context.payload["qty"] * context.payload["price"]
        context.emit(
            "ORDER_PLACED",
            {"sku": context.payload["sku"], "total": total, "commission": context.payload.get("commission", 0)},
            source="orders",
        )


class ChargeCustomer(BaseCommand):
    command_prefix = "charge"

    async def invoke(self, context: CommandContext) -> None:
        context.emit("CUSTOMER_CHARGED", {"amount": self.event.payload["total"]}, source="billing")


def _commission(context: CommandContext) -> dict[str, Any]:
    rate = context.state.get("commission_rate", 0.0)
    return {"commission": round(context.payload["qty"] * context.payload["price"] * rate, 2)}


def _build(metrics: FakeMetricsRegistry) -> CapabilityBuilder:
    base = CapabilityBuilder()
    base.register_command_factory("PLACE_ORDER", PlaceOrder)
    base.register_command_factory("ORDER_PLACED", ChargeCustomer)
    base.ensure_registered("PLACE_ORDER", "ORDER_PLACED")

    authorizer = AllowListAuthorizer({"web": ["PLACE_ORDER"], "orders": ["ORDER_PLACED"]})
    validator = RequiredFieldsValidator({"PLACE_ORDER": ["sku", "qty", "price"]})
    return base.with_hooks(
        pre=[
            logging_hook(),
            authorization_hook(authorizer),
            validation_hook(validator),
            state_hook("commission_rate", lambda ctx: 0.05),
            enrichment_hook(lambda ctx: _commission(ctx) if ctx.event.type == "PLACE_ORDER" else None),
        ],
        post=[metrics_hook(metrics)],
    )


class TestOrderFlow:
    def test_chain_runs_to_completion(self) -> None:
        settings = EnvSettingsLoader({"SHADOW_TX_CHAIN_MAX_ROUNDS": "5"}).load(EngineSettings)
        metrics = FakeMetricsRegistry()
        observer = RecordingErrorObserver()
        mediator = TransactionMediator(
            _build(metrics),
            FifoEventCollector(),
            observer=observer,
            chain_max_rounds=settings.chain_max_rounds,
        )
        order = Event.create(
            "PLACE_ORDER", {"sku": "A-1", "qty": 2, "price": 50}, source="web", correlation_id="order-42"
        )

        observed = asyncio.run(mediator.process_chain(order))

        assert len(observer) == 0
        assert [e.type for e in observed] == ["ORDER_PLACED", "CUSTOMER_CHARGED"]
        placed, charged = observed
        assert placed.payload == {"sku": "A-1", "total": 100, "commission": 5.0}
        assert charged.payload == {"amount": 100}
        assert {e.correlation_id for e in observed} == {"order-42"}
        assert charged.causation_id == placed.id
        metrics.assert_counter_incremented("command.executions", 2)

    def test_unauthorized_root_event_stops_the_chain(self) -> None:
        metrics = FakeMetricsRegistry()
        observer = RecordingErrorObserver()
        mediator = TransactionMediator(_build(metrics), FifoEventCollector(), observer=observer)
        order = Event.create("PLACE_ORDER", {"sku": "A-1", "qty": 1, "price": 1}, source="partner")

        observed = asyncio.run(mediator.process_chain(order))

        assert observed == []
        assert [r.stage for r in observer.records] == [ProcessingStage.PRE_FAILED]
        assert observer.records[0].error_code == "unauthorized"
