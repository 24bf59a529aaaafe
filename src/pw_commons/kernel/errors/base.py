"""Root error class for the pw-commons error hierarchy."""

from __future__ import annotations

import json
from typing import Any

from pw_commons.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

_REDACTED = "[REDACTED]"


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
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
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging).

        ``detail`` values under sensitive keys (``password``, ``salt``,
        ``digest``, ...) are replaced with ``[REDACTED]``; ``self.detail``
        itself is left untouched.
        """
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": {
                k: (_REDACTED if k.lower() in DEFAULT_SENSITIVE_FIELDS else v) for k, v in self.detail.items()
            },
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
