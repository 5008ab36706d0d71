"""Testing generators – Hypothesis strategies for events."""
from shadow_tx.testing.generators.strategies import event_strategy, event_type_strategy, payload_strategy

__all__ = ["event_strategy", "event_type_strategy", "payload_strategy"]
