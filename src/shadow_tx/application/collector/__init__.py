"""Application collector – side-effect event log."""
from shadow_tx.application.collector.collector import EventCollector, FifoEventCollector

__all__ = ["EventCollector", "FifoEventCollector"]
