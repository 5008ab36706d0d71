"""
shadow_tx – in-process event-driven command execution engine.

Import path convention::

    from shadow_tx.kernel.events import Event
    from shadow_tx.application.builder import CapabilityBuilder
    from shadow_tx.application.mediator import TransactionMediator
    from shadow_tx.application.collector import FifoEventCollector
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
