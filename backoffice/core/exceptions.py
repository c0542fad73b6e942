"""
Custom Exceptions for the Back-Office Application

This module defines custom exception classes used throughout the application
for better error handling and debugging.
"""

from typing import Any, Dict, List, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    OPERATION_FAILED = "OPERATION_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    FOREIGN_KEY_VIOLATION = "FOREIGN_KEY_VIOLATION"
    CONCURRENT_MODIFICATION = "CONCURRENT_MODIFICATION"

    # Business logic errors
    ALREADY_ASSIGNED = "ALREADY_ASSIGNED"
    INACTIVE_FEE_STRUCTURE = "INACTIVE_FEE_STRUCTURE"
    EMPTY_SELECTION = "EMPTY_SELECTION"
    RESOURCE_IN_USE = "RESOURCE_IN_USE"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# General Application Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 422
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class ConflictError(BaseAppException):
    """Exception raised when a request conflicts with the current state"""

    def __init__(
        self,
        message: str = "Request conflicts with existing data",
        error_code: ErrorCode = ErrorCode.CONSTRAINT_VIOLATION,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details, 409)


# ========================================
# Repository Exceptions
# ========================================

class RepositoryError(BaseAppException):
    """Exception raised when a repository operation fails"""

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        table: Optional[str] = None,
    ):
        details = {
            "operation": operation,
            "table": table
        }
        super().__init__(message, ErrorCode.DATABASE_ERROR, details, 500)


class EntityAlreadyExistsError(ConflictError):
    """Exception raised when an insert or update violates a uniqueness rule"""

    def __init__(
        self,
        message: str = "Duplicate entry",
        table: Optional[str] = None,
    ):
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, {"table": table})


class ForeignKeyViolationError(ConflictError):
    """Exception raised when a row points at a parent that does not exist"""

    def __init__(
        self,
        message: str = "Referenced record does not exist",
        table: Optional[str] = None,
    ):
        super().__init__(message, ErrorCode.FOREIGN_KEY_VIOLATION, {"table": table})


class OptimisticLockError(ConflictError):
    """Exception raised when a row was modified by someone else"""

    def __init__(
        self,
        message: str = "Record was modified by another user; reload and retry",
        expected_version: Optional[int] = None,
        actual_version: Optional[int] = None,
    ):
        details = {
            "expected_version": expected_version,
            "actual_version": actual_version,
        }
        super().__init__(message, ErrorCode.CONCURRENT_MODIFICATION, details)


# ========================================
# Fee Ledger Exceptions
# ========================================

class FeeAssignmentError(ValidationError):
    """Exception raised when a fee structure cannot be assigned"""

    def __init__(
        self,
        message: str = "Fee structure cannot be assigned",
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ):
        super().__init__(message, error_code=error_code)


class AlreadyAssignedError(ConflictError):
    """Exception raised when a student already holds ledger rows for a structure"""

    def __init__(self, pairs: int, fee_structure_id: Optional[str] = None):
        super().__init__(
            f"{pairs} student/component pair(s) are already assigned",
            ErrorCode.ALREADY_ASSIGNED,
            {"pairs": pairs, "fee_structure_id": fee_structure_id},
        )


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "ValidationError",
    "ResourceNotFoundError",
    "ConflictError",
    "RepositoryError",
    "EntityAlreadyExistsError",
    "ForeignKeyViolationError",
    "OptimisticLockError",
    "FeeAssignmentError",
    "AlreadyAssignedError",
]
