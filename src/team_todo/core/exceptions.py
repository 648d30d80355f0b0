from __future__ import annotations

from .enums import ErrorCategory


class DomainError(Exception):
    """Base exception for business rule violations."""

    category = ErrorCategory.VALIDATION


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    category = ErrorCategory.VALIDATION


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    category = ErrorCategory.AUTHORIZATION


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    category = ErrorCategory.NOT_FOUND


class InfrastructureError(DomainError):
    """Store or network failure. The message is safe to show to users."""

    category = ErrorCategory.INFRASTRUCTURE
