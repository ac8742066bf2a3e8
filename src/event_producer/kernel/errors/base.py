"""Root of the producer's error hierarchy.

Errors on the publish path are values: they are built, logged and attached to
a ``PublishResult``. Only configuration errors are raised to the caller.
"""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Message plus a stable ``code`` slug for log lines and result objects.

    Args:
        message: Human-readable description.
        code: Overrides the class-level ``default_code``.
        detail: Extra key/value context, JSON-safe.
        cause: Underlying exception, also chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
