"""Custom exceptions for the storage facade.

This module defines the exception hierarchy raised by backing stores and by
the WebStorage facade. Only capacity and backend faults are ever converted
into boolean results; everything else propagates to the caller.
"""

from typing import Optional


class StorageError(Exception):
    """Base exception for all storage-related errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
    """

    def __init__(self, message: str, code: str) -> None:
        """Initialize storage error.

        Args:
            message: Human-readable error description
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code


class CapacityExceededError(StorageError):
    """Raised by a backing store when a write would exceed its quota."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="capacity_exceeded")


class BackendError(StorageError):
    """Raised when a backing store fails for a reason other than capacity."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="backend_error")


class SerializationError(StorageError, ValueError):
    """Raised when a value cannot be encoded as JSON.

    Covers unsupported types, cyclic structures and non-finite floats.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="serialization_error")


class DeserializationError(StorageError, ValueError):
    """Raised when stored text is not valid JSON.

    Attributes:
        key: Logical or physical key whose stored text failed to decode
    """

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        """Initialize deserialization error.

        Args:
            message: Description of the decoding failure
            key: Key whose stored text is corrupt, if known
        """
        super().__init__(message=message, code="deserialization_error")
        self.key = key


class ContractViolationError(StorageError, ValueError):
    """Raised when a caller breaks the storage contract.

    Examples are a missing backing store, a negative index, or decoding a
    physical key outside the requested namespace.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="contract_violation")
