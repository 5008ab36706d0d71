"""Application mediator – event intake and error routing."""
from shadow_tx.application.mediator.errors import ErrorObserver, ErrorRecord, RecordingErrorObserver
from shadow_tx.application.mediator.mediator import DEFAULT_CHAIN_MAX_ROUNDS, TransactionMediator

__all__ = [
    "DEFAULT_CHAIN_MAX_ROUNDS",
    "ErrorObserver",
    "ErrorRecord",
    "RecordingErrorObserver",
    "TransactionMediator",
]
