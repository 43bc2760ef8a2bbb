"""Error Hierarchy - typed, categorized exceptions for all Warehouser failure modes.

Invariants:
    - Every error has a code (str), kind (ErrorKind) and severity (ErrorSeverity)
    - ErrorKind is transport-agnostic; HTTP status mapping lives in api/error_handlers.py
    - Messages name the offending id(s) and the rule that was violated

Design Decisions:
    - Single hierarchy with WarehouserError base: one global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: ids travel with the error for structured logging
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """What went wrong, independent of how it is reported."""
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INCONSISTENCY = "inconsistency"
    STORE_UNAVAILABLE = "store_unavailable"
    NOT_IMPLEMENTED = "not_implemented"
    SERIALIZATION_FAILURE = "serialization_failure"


@dataclass
class ErrorContext:
    """Ids attached to an error for structured logging."""
    item_id: int | None = None
    warehouse_id: int | None = None


class WarehouserError(Exception):
    """Base exception for all Warehouser errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.context = context or ErrorContext()

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "severity": self.severity.value,
            "item_id": self.context.item_id,
            "warehouse_id": self.context.warehouse_id,
        }


# --- Domain Errors ------------------------------------------------------------

class NotFoundError(WarehouserError):
    """Referenced item or warehouse does not exist."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_FOUND", ErrorKind.NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )


class ConflictError(WarehouserError):
    """Request violates a business rule (duplicate id, already/never assigned, ...)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorKind.CONFLICT,
            ErrorSeverity.WARNING, context,
        )


class NotImplementedOperationError(WarehouserError):
    """Operation exists on the surface but is deliberately unsupported."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_IMPLEMENTED", ErrorKind.NOT_IMPLEMENTED,
            ErrorSeverity.WARNING, context,
        )


# --- Integrity / Infrastructure Errors ----------------------------------------

class InconsistencyError(WarehouserError):
    """Item side and warehouse side of a relationship disagree."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"INCONSISTENCY IN DATABASE: {message}",
            "INCONSISTENCY", ErrorKind.INCONSISTENCY,
            ErrorSeverity.CRITICAL, context,
        )


class StoreUnavailableError(WarehouserError):
    """Could not obtain or use a persistence handle."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_UNAVAILABLE", ErrorKind.STORE_UNAVAILABLE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation


class SerializationFailureError(WarehouserError):
    """A response body could not be encoded."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SERIALIZATION_FAILURE", ErrorKind.SERIALIZATION_FAILURE,
            ErrorSeverity.CRITICAL, context,
        )
