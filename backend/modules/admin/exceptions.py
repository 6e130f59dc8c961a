"""
Admin module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class MissingIdError(ValidationError):
    """Raised when an update or delete body carries no id."""

    def __init__(self, resource: str, operation: str):
        super().__init__(
            f"{resource} ID is required for {operation}",
            code="MISSING_ID",
            details={"resource": resource, "operation": operation},
        )


class CurationItemNotFoundError(NotFoundError):
    """Raised when a trending product or featured artist row is gone."""

    def __init__(self, table: str, item_id: str):
        super().__init__(
            f"Item not found: {item_id}",
            code="ITEM_NOT_FOUND",
            details={"table": table, "id": item_id},
        )


class RejectionReasonRequiredError(ValidationError):
    """Raised when a user is rejected without a reason."""

    def __init__(self):
        super().__init__("Please provide a rejection reason", code="REJECTION_REASON_REQUIRED")


class InvalidMaintenanceActionError(ValidationError):
    """Raised for an unknown maintenance action."""

    def __init__(self, action: str, available_actions: list[str]):
        super().__init__(
            "Invalid maintenance action",
            code="INVALID_ACTION",
            details={"action": action, "available_actions": available_actions},
        )
