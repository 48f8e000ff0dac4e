"""Domain exceptions for bpm-access.

Defines domain-level exceptions for business rule violations and store
failures. Services never let these escape: the error classifier maps them
to the result envelope returned to the caller.
"""

from typing import Any


class BpmAccessException(Exception):
    """Base exception for all bpm-access errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_type, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serializable form used by structured logs."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ResourceNotFoundException(BpmAccessException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class RoleAlreadyExistsException(BpmAccessException):
    """Raised when creating a role whose normalized name already exists in the tenant."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "The role already exists",
            "ROLE_ALREADY_EXISTS",
            {"name": name},
        )


class PermissionAlreadyExistsException(BpmAccessException):
    """Raised when a permission for the same (roleId, moduleId) pair already exists."""

    def __init__(self, role_id: str, module_id: str) -> None:
        super().__init__(
            "The permission already exists",
            "PERMISSION_ALREADY_EXISTS",
            {"role_id": role_id, "module_id": module_id},
        )


class StoreInternalError(BpmAccessException):
    """Raised when a backing store reports its own internal error.

    The message is the store-provided message, unchanged.
    """

    def __init__(self, message: Any) -> None:
        super().__init__(str(message), "STORE_INTERNAL_ERROR")


class InvalidQueryParameterException(BpmAccessException):
    """Raised when an encoded query parameter (filters, fields) cannot be decoded."""

    def __init__(self, parameter: str, reason: str) -> None:
        super().__init__(
            f"Invalid {parameter} parameter: {reason}",
            "INVALID_QUERY_PARAMETER",
            {"parameter": parameter},
        )


class StoreNotConfiguredException(BpmAccessException):
    """Raised when a store client is requested but its endpoint is not configured."""

    def __init__(self, store: str) -> None:
        super().__init__(
            f"{store} is not configured",
            "STORE_NOT_CONFIGURED",
            {"store": store},
        )
