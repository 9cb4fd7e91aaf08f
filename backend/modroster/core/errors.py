"""Error Hierarchy — typed, categorized exceptions for all modroster failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Lookup errors (404) are recoverable; catalog data errors (500) are bugs in static data
    - to_response() produces the REST envelope
    - Unknown product names during member resolution are NOT errors (placeholder instead)

Design Decisions:
    - Single hierarchy with ModRosterError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_INTEGRITY = "data_integrity"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_name: str | None = None
    chip_name: str | None = None
    attribute: str | None = None
    debug_info: dict[str, Any] | None = None


class ModRosterError(Exception):
    """Base exception for all modroster errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "product_name": self.context.product_name,
                    "chip_name": self.context.chip_name,
                    "attribute": self.context.attribute,
                },
            }
        }


# ─── Request Errors (400) ───────────────────────────────────────

class InputValidationError(ModRosterError):
    """Request input failed a domain-level check."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


# ─── Lookup Errors (404) ────────────────────────────────────────

class ProductNotFoundError(ModRosterError):
    """Requested product is not in the catalog."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_name = name
        super().__init__(
            f"Product '{name}' not found",
            "PRODUCT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.name = name


class ChipNotFoundError(ModRosterError):
    """Requested chip is not in the catalog."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.chip_name = name
        super().__init__(
            f"Chip '{name}' not found",
            "CHIP_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.name = name


# ─── Catalog Data Errors (500) ──────────────────────────────────

class UnknownAttributeError(ModRosterError):
    """Chip declares neither a direct value nor an emulation list for an attribute."""
    def __init__(
        self, attribute: str, chip_name: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.chip_name = chip_name
        ctx.attribute = attribute
        super().__init__(
            f"Unknown {attribute} for chip '{chip_name}'",
            "UNKNOWN_ATTRIBUTE", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.attribute = attribute
        self.chip_name = chip_name


class CatalogIntegrityError(ModRosterError):
    """Static catalog tables are inconsistent (dangling chip reference, duplicate name)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CATALOG_INTEGRITY", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.CRITICAL, context, 500,
        )
