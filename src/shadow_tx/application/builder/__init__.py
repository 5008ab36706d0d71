"""Application builder – capability composition."""
from shadow_tx.application.builder.builder import CapabilityBuilder
from shadow_tx.application.builder.hooked import HookedCommand

__all__ = ["CapabilityBuilder", "HookedCommand"]
