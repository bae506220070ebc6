"""Standardized error types for subjects, views and controllers.

This module provides a small hierarchy of error classes with consistent
dictionary serialization, so callers can surface failures uniformly.
Each error also derives from the closest built-in exception so existing
``except IndexError`` style handlers keep working.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


# -----------------------------------------------------------------------------
# Error Code Constants
# -----------------------------------------------------------------------------

class ErrorCode:
    """Constants for error codes carried by :class:`StatebindError`."""

    # Collection errors
    OUT_OF_RANGE = "out_of_range"

    # View errors
    NOT_IMPLEMENTED = "not_implemented"
    UNKNOWN_FIELD_EVENT = "unknown_field_event"

    # Collaborator errors
    MISCONFIGURED_COLLABORATOR = "misconfigured_collaborator"
    REQUEST_MISCONFIGURED = "request_misconfigured"


# -----------------------------------------------------------------------------
# Base Error Class
# -----------------------------------------------------------------------------

@dataclass
class StatebindError(Exception):
    """Base exception class for all statebind errors.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
        suggestion: Actionable guidance for recovery.
    """

    error_code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    severity: ClassVar[str] = "error"

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# -----------------------------------------------------------------------------
# Collection Errors
# -----------------------------------------------------------------------------

@dataclass
class OutOfRangeError(StatebindError, IndexError):
    """Raised by :meth:`Collection.at` for an index outside ``[0, size)``."""

    error_code: str = field(default=ErrorCode.OUT_OF_RANGE)
    message: str = field(default="Collection index is out of range")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Check the index with in_range() before calling at()")

    index: Any = None
    size: int = 0

    def __post_init__(self) -> None:
        if not self.details:
            self.details = {"index": self.index, "size": self.size}
        super().__post_init__()


# -----------------------------------------------------------------------------
# View Errors
# -----------------------------------------------------------------------------

@dataclass
class DrawNotImplementedError(StatebindError, NotImplementedError):
    """Raised when a view without a concrete ``draw`` is constructed."""

    error_code: str = field(default=ErrorCode.NOT_IMPLEMENTED)
    message: str = field(default="draw must be defined in a subclass")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Override View.draw() to build and return the element handle")

    view_class: str = ""

    def __post_init__(self) -> None:
        if self.view_class and not self.details:
            self.details = {"view_class": self.view_class}
        super().__post_init__()


@dataclass
class FieldEventError(StatebindError, ValueError):
    """Raised when a field cannot observe the requested input event."""

    error_code: str = field(default=ErrorCode.UNKNOWN_FIELD_EVENT)
    message: str = field(default="Field does not expose the requested event")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Use the name of a signal the field widget emits")

    event: str = ""

    def __post_init__(self) -> None:
        if self.event and not self.details:
            self.details = {"event": self.event}
        super().__post_init__()


# -----------------------------------------------------------------------------
# Collaborator Errors
# -----------------------------------------------------------------------------

@dataclass
class MisconfiguredCollaboratorError(StatebindError, AttributeError):
    """Raised at fire time when the controller lacks the configured action."""

    error_code: str = field(default=ErrorCode.MISCONFIGURED_COLLABORATOR)
    message: str = field(default="Controller does not expose the configured action")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Pass an action name the controller implements")

    action: str | None = None
    controller_class: str = ""

    def __post_init__(self) -> None:
        if not self.details:
            self.details = {"action": self.action, "controller": self.controller_class}
        super().__post_init__()


@dataclass
class RequestConfigError(StatebindError, ValueError):
    """Raised when a request controller is missing its path or method."""

    error_code: str = field(default=ErrorCode.REQUEST_MISCONFIGURED)
    message: str = field(default="Request controller is missing configuration")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Provide action_path and action_method when constructing the controller")


__all__ = [
    "ErrorCode",
    "StatebindError",
    "OutOfRangeError",
    "DrawNotImplementedError",
    "FieldEventError",
    "MisconfiguredCollaboratorError",
    "RequestConfigError",
]
