"""
Custom exceptions for the application.

This module defines domain-specific exceptions for better error handling
and more meaningful error messages throughout the application.
"""

from typing import Optional, Any, Dict


class ApplicationException(Exception):
    """Base exception for all application-specific exceptions."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DatabaseException(ApplicationException):
    """Exception raised for database-related errors."""
    pass


class NotFoundException(ApplicationException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any, message: Optional[str] = None):
        message = message or f"{resource} with id {identifier} not found"
        super().__init__(message, {"resource": resource, "identifier": identifier})

    @classmethod
    def does_not_exist(cls, resource: str, identifier: Any) -> "NotFoundException":
        """Variant used when a referenced record is missing."""
        return cls(resource, identifier, f"{resource} with id {identifier} does not exist")


class ConflictException(ApplicationException):
    """Exception raised when an operation conflicts with existing state."""
    pass


class DuplicateException(ConflictException):
    """Exception raised when attempting to create a duplicate resource."""

    def __init__(self, resource: str, field: str, value: Any):
        message = f"{resource} already exists with {field}: {value}"
        super().__init__(message, {"resource": resource, "field": field, "value": value})
