"""
Domain exceptions for the production planning service.

Per-item exceptions (ValidationError, MissingCapacityError, LookupFailure)
are caught by the planner and reported next to the computed lines.
EmptyPlanError and the storage errors escape to the caller.
"""

from typing import Any


class PlannerError(Exception):
    """Base exception for all planner errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


def _describe_item(
    index: int | None,
    sellable_product_id: str | None,
    variation_id: str | None,
) -> str:
    label = f"product '{sellable_product_id}'"
    if variation_id:
        label += f" / variation '{variation_id}'"
    if index is not None:
        label = f"item #{index} ({label})"
    return label


# Planning Exceptions
class ValidationError(PlannerError):
    """Input validation failed."""

    def __init__(
        self,
        field: str,
        message: str,
        value: Any = None,
        index: int | None = None,
    ):
        prefix = f"item #{index}: " if index is not None else ""
        super().__init__(
            f"Validation error for '{field}': {prefix}{message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
                "index": index,
            },
        )


class InvalidQuantityError(ValidationError):
    """Planning item quantity is zero or negative."""

    def __init__(self, index: int, sellable_product_id: str, quantity: int):
        super().__init__(
            field="quantity",
            message=(
                f"quantity must be greater than 0 for "
                f"{_describe_item(None, sellable_product_id, None)}, got {quantity}"
            ),
            value=quantity,
            index=index,
        )
        self.details["sellable_product_id"] = sellable_product_id


class VariationMismatchError(ValidationError):
    """variation_id does not fit the sellable product's type."""

    def __init__(
        self,
        index: int,
        sellable_product_id: str,
        variation_id: str | None,
        reason: str,
    ):
        super().__init__(
            field="variation_id",
            message=f"{reason} ({_describe_item(None, sellable_product_id, variation_id)})",
            value=variation_id,
            index=index,
        )
        self.details["sellable_product_id"] = sellable_product_id


class MissingCapacityError(PlannerError):
    """Catalog bottle type has no usable capacity."""

    def __init__(
        self,
        sellable_product_id: str,
        variation_id: str | None = None,
        bottle_type_id: str | None = None,
        index: int | None = None,
    ):
        super().__init__(
            f"Missing bottle capacity for {_describe_item(index, sellable_product_id, variation_id)}"
            + (f", bottle type '{bottle_type_id}'" if bottle_type_id else ""),
            code="MISSING_CAPACITY",
            details={
                "sellable_product_id": sellable_product_id,
                "variation_id": variation_id,
                "bottle_type_id": bottle_type_id,
                "index": index,
            },
        )


class LookupFailure(PlannerError):
    """External resolver is unreachable, timed out, or has no record."""

    def __init__(self, resolver: str, key: str, reason: str | None = None):
        super().__init__(
            f"{resolver} lookup failed for '{key}'" + (f": {reason}" if reason else ""),
            code="LOOKUP_FAILURE",
            details={"resolver": resolver, "key": key, "reason": reason},
        )


class EmptyPlanError(PlannerError):
    """No planning item survived validation and resolution."""

    def __init__(self, issues: list[dict[str, Any]] | None = None):
        issues = issues or []
        message = "Production plan has no valid items to calculate"
        if issues:
            message += f" ({len(issues)} item(s) rejected)"
        super().__init__(
            message,
            code="EMPTY_PLAN",
            details={"issues": issues},
        )


# Storage Exceptions
class StorageError(PlannerError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class ConfigurationError(PlannerError):
    """Configuration error."""

    pass
