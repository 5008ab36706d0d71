"""Testing fakes – in-memory doubles for engine ports."""
from shadow_tx.testing.fakes.hooks import CallRecorder, HookCall, RecordingHook
from shadow_tx.testing.fakes.metrics import FakeMetricsRegistry
from shadow_tx.testing.fakes.services import AllowListAuthorizer, RequiredFieldsValidator
from shadow_tx.kernel.time import FrozenClock

__all__ = [
    "AllowListAuthorizer",
    "CallRecorder",
    "FakeMetricsRegistry",
    "FrozenClock",
    "HookCall",
    "RecordingHook",
    "RequiredFieldsValidator",
]
