"""Root error class for the scalike error hierarchy.

Every error names the public operation that failed (``"Seq.create()"``,
``"flat_map"``, ``"head"``) when it is known, so a log line or an API payload
built from :meth:`ScalikeError.to_dict` says *where* a pipeline broke, not
only *what* went wrong.
"""

from __future__ import annotations

import json
from typing import Any


class ScalikeError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        operation: Public operation that failed, e.g. ``"sort_by"``.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; values should be JSON-friendly.
        cause: Original exception that triggered this error.
    """

    default_code: str = "scalike_error"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=repr)

    def __repr__(self) -> str:
        where = f", operation={self.operation!r}" if self.operation else ""
        return f"{type(self).__name__}(code={self.code!r}{where}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for structured logs; ``operation``/``cause`` only when set."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.operation is not None:
            payload["operation"] = self.operation
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["ScalikeError"]
