"""
Result Types

Every fallible use case returns a Result: either a value or a structured Error.
Expected failures (conflicts, missing records, expired tokens) travel as values;
exceptions are reserved for faults.
"""

from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Failure kinds reported to triggers and administrative callers"""

    conflict = "CONFLICT"
    not_found = "NOT_FOUND"
    already_processed = "ALREADY_PROCESSED"
    already_member = "ALREADY_MEMBER"
    already_compiled = "ALREADY_COMPILED"
    expired = "EXPIRED"
    duplicate_submission = "DUPLICATE_SUBMISSION"
    duplicate_pending_invite = "DUPLICATE_PENDING_INVITE"
    no_active_window = "NO_ACTIVE_WINDOW"
    validation_error = "VALIDATION_ERROR"


class Error:
    def __init__(self, code: str, message: str):
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.code == other.code and self.message == other.message


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def to_payload(self) -> Dict[str, Any]:
        """Render as the structured ``{success, ...}`` shape used by jobs and admin calls"""
        if self.is_err():
            return {"success": False, "code": self.error.code, "reason": self.error.message}
        payload: Dict[str, Any] = {"success": True}
        if isinstance(self.value, BaseModel):
            payload.update(self.value.model_dump(mode="json"))
        elif self.value is not None:
            payload["value"] = self.value
        return payload


class Return:
    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result[Any]:
        return Result(error=error)
