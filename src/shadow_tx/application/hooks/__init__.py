"""Application hooks – built-in capabilities and their service ports."""
from shadow_tx.application.hooks.builtin import (
    AuthorizationHook,
    EnrichmentHook,
    LoggingHook,
    MetricsHook,
    StateHook,
    ValidationHook,
    authorization_hook,
    enrichment_hook,
    logging_hook,
    metrics_hook,
    state_hook,
    validation_hook,
)
from shadow_tx.application.hooks.ports import Authorizer, PayloadValidator

__all__ = [
    "AuthorizationHook",
    "Authorizer",
    "EnrichmentHook",
    "LoggingHook",
    "MetricsHook",
    "PayloadValidator",
    "StateHook",
    "ValidationHook",
    "authorization_hook",
    "enrichment_hook",
    "logging_hook",
    "metrics_hook",
    "state_hook",
    "validation_hook",
]
