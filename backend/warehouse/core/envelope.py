"""Response Envelope — the uniform success/failure wrapper as a two-variant sum type.

Invariants:
    - Every HTTP response body is exactly one of Ok or Err
    - to_response() omits keys whose value is absent (no null placeholders)
    - Ok always serializes success=True, Err always success=False

Design Decisions:
    - Frozen dataclasses over one optional-field model: the variant decides which
      keys can exist (ADR: illegal states unrepresentable)
    - validationErrors keeps the camelCase wire name the UI already consumes
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ok:
    """Success variant — payload plus optional human-readable message."""
    data: Any = None
    message: str | None = None

    def to_response(self) -> dict:
        body: dict[str, Any] = {"success": True}
        if self.data is not None:
            body["data"] = self.data
        if self.message is not None:
            body["message"] = self.message
        return body


@dataclass(frozen=True)
class Err:
    """Failure variant — error summary, optional message and field errors."""
    error: str
    message: str | None = None
    validation_errors: dict[str, str] | None = None

    def to_response(self) -> dict:
        body: dict[str, Any] = {"success": False, "error": self.error}
        if self.message is not None:
            body["message"] = self.message
        if self.validation_errors:
            body["validationErrors"] = dict(self.validation_errors)
        return body
