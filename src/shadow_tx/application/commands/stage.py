"""Application commands – ProcessingStage state machine."""
from __future__ import annotations

from enum import Enum


class ProcessingStage(str, Enum):
    """Lifecycle of a single ``process_event`` call.

    ::

        RECEIVED → BUILDING → BUILD_FAILED → ERROR_HANDLED
                            → BUILT → PRE_HOOKS → PRE_FAILED → ERROR_HANDLED
                                    → CORE → CORE_FAILED → ERROR_HANDLED
                                    → POST_HOOKS → POST_FAILED → ERROR_HANDLED
                                                 → COMPLETED

    There is no retry edge.
    """

    RECEIVED = "RECEIVED"
    BUILDING = "BUILDING"
    BUILD_FAILED = "BUILD_FAILED"
    BUILT = "BUILT"
    PRE_HOOKS = "PRE_HOOKS"
    PRE_FAILED = "PRE_FAILED"
    CORE = "CORE"
    CORE_FAILED = "CORE_FAILED"
    POST_HOOKS = "POST_HOOKS"
    POST_FAILED = "POST_FAILED"
    COMPLETED = "COMPLETED"
    ERROR_HANDLED = "ERROR_HANDLED"

    def failed(self) -> "ProcessingStage":
        """Return the failure stage reached when this stage raises."""
        return _FAILURES.get(self, self)

    @property
    def is_failure(self) -> bool:
        return self in _FAILURES.values()

    @property
    def is_terminal(self) -> bool:
        return self in (ProcessingStage.COMPLETED, ProcessingStage.ERROR_HANDLED)


_FAILURES: dict[ProcessingStage, ProcessingStage] = {
    ProcessingStage.RECEIVED: ProcessingStage.BUILD_FAILED,
    ProcessingStage.BUILDING: ProcessingStage.BUILD_FAILED,
    ProcessingStage.BUILT: ProcessingStage.PRE_FAILED,
    ProcessingStage.PRE_HOOKS: ProcessingStage.PRE_FAILED,
    ProcessingStage.CORE: ProcessingStage.CORE_FAILED,
    ProcessingStage.POST_HOOKS: ProcessingStage.POST_FAILED,
}


__all__ = ["ProcessingStage"]
