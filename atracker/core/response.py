# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Validation Failures ===

    # the raw form input violates an entry rule (empty field, bad hours, etc.)
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # input structure is malformed or of the wrong type
    INVALID_INPUT = "INVALID_INPUT"

    # === Internal Faults ===

    # encoding or writing a slot failed
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Response:
    """
    Standard Response object for Tracker manipulators and the persistence adapter.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation.
        error (ErrorCode | str | None): Optional machine-readable error identifier.
        data (dict): Optional payload, varies by operation.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | str | None:
        return self._error

    @property
    def data(self) -> dict:
        return self._data

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        data: dict | None = None,
    ) -> Response:
        return cls(success=True, detail=detail, error=None, data=data)

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        data: dict | None = None,
    ) -> Response:
        return cls(success=False, detail=detail, error=error, data=data)

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Response({self._success}, {self._detail!r}, {self._error})"

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"
        else:
            error_str = (
                self.error.value if isinstance(self.error, Enum) else self.error or ""
            )
            return f"Error: {error_str}"
