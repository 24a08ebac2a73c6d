"""Application layer exceptions."""

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of error."""
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


class UnauthorizedError(ApplicationError):
    """Raised when authentication is required but not provided or invalid."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: str = "UNAUTHORIZED",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details)


class InvalidCredentialsError(UnauthorizedError):
    """
    Raised when email or password do not match.

    The message is identical for an unknown email and a wrong password.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, "INVALID_CREDENTIALS")


class AccountLockedError(UnauthorizedError):
    """Raised while an account is locked after repeated failed logins."""

    def __init__(self, minutes_remaining: int):
        """
        Initialize account locked error.

        Args:
            minutes_remaining: Whole minutes until the lock expires (rounded up)
        """
        self.minutes_remaining = minutes_remaining
        super().__init__(
            f"Account locked. Try again in {minutes_remaining} minute(s)",
            "ACCOUNT_LOCKED",
            {"minutes_remaining": minutes_remaining},
        )


class AccountDisabledError(UnauthorizedError):
    """Raised when a deactivated account tries to authenticate."""

    def __init__(self, message: str = "Account is disabled"):
        super().__init__(message, "ACCOUNT_DISABLED")


class InvalidTokenError(UnauthorizedError):
    """Raised when a session token is malformed, tampered with or expired."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, "INVALID_TOKEN")


class ForbiddenError(ApplicationError):
    """Raised when user lacks permission to perform an action."""

    def __init__(
        self,
        message: str = "Insufficient permissions",
        required_roles: Optional[list[str]] = None,
    ):
        """
        Initialize forbidden error.

        Args:
            message: Human-readable error message
            required_roles: Roles any one of which would have been sufficient
        """
        details = {}
        if required_roles:
            details["required_roles"] = list(required_roles)

        super().__init__(message, "FORBIDDEN", details)


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


class NotFoundError(ApplicationError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        """
        Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource (e.g., 'User', 'Role')
            resource_id: ID of the resource that was not found
        """
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = str(resource_id)

        super().__init__(message, "NOT_FOUND", details)


class ConflictError(ApplicationError):
    """Raised when an operation conflicts with the current state."""

    def __init__(
        self,
        message: str = "Operation conflicts with current state",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
    ):
        """
        Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource involved
            field: Field holding the conflicting value
        """
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field

        super().__init__(message, "CONFLICT", details)


class ValidationError(ApplicationError):
    """Raised when application-level validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        """
        Initialize validation error.

        Args:
            message: Human-readable error message
            field: Field that failed validation
            value: Invalid value
        """
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(message, "VALIDATION_ERROR", details)


class BadRequestError(ApplicationError):
    """Raised when a request cannot be carried out as submitted."""

    def __init__(self, message: str = "Bad request"):
        super().__init__(message, "BAD_REQUEST")


class InternalError(ApplicationError):
    """
    Raised in place of an unexpected failure.

    The original exception is logged server side; only a generic message
    leaves the application layer.
    """

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, "INTERNAL_ERROR")
