"""Root error class for the shadow-tx error hierarchy."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


class BaseError(Exception):
    """Every engine error carries a stable ``code`` and a ``detail`` mapping.

    ``code`` is what error observers and logs key on; ``message`` is for
    humans.  ``str(error)`` is a single JSON line so that failures stay
    parseable when they end up in plain-text logs.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: Mapping[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
