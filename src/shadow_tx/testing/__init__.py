"""Testing support – fakes and generators for engine tests."""

from shadow_tx.testing.fakes import (
    AllowListAuthorizer,
    CallRecorder,
    FakeMetricsRegistry,
    FrozenClock,
    HookCall,
    RecordingHook,
    RequiredFieldsValidator,
)
from shadow_tx.testing.generators import event_strategy, event_type_strategy, payload_strategy

__all__ = [
    "AllowListAuthorizer",
    "CallRecorder",
    "FakeMetricsRegistry",
    "FrozenClock",
    "HookCall",
    "RecordingHook",
    "RequiredFieldsValidator",
    "event_strategy",
    "event_type_strategy",
    "payload_strategy",
]
