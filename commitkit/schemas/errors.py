"""
Module 00 - Schemas
File: errors.py

Purpose: Error taxonomy shared by the commitment structures.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input Errors
    EMPTY_INPUT = "EMPTY_INPUT"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    INVALID_KEY_LENGTH = "INVALID_KEY_LENGTH"
    INVALID_BAG_SIZE = "INVALID_BAG_SIZE"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class CommitError(BaseModel):
    """
    Base error model for structured error reporting.

    Lets callers pass or log a failure without holding on to the
    exception object.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.EMPTY_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "CommitKitException":
        """Convert this error model to a raisable exception."""
        return CommitKitException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class CommitKitException(Exception):
    """
    Base exception for all commitkit errors.

    Carries structured error information and can be converted
    to/from CommitError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "COMMITKIT_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> CommitError:
        """Convert this exception to a CommitError model."""
        return CommitError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyInputError(CommitKitException, ValueError):
    """Raised when a Merkle tree is built from an empty item sequence."""

    def __init__(
        self,
        message: str = "Cannot build a Merkle tree from an empty item sequence",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
        )


class IndexOutOfRange(CommitKitException, IndexError):
    """Raised when a proof is requested for a leaf index not in the tree."""

    def __init__(
        self,
        leaf_index: int,
        leaf_count: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        full_details["leaf_index"] = leaf_index
        full_details["leaf_count"] = leaf_count
        super().__init__(
            message=f"Leaf index {leaf_index} out of range for {leaf_count} leaves",
            code=ErrorCodes.INDEX_OUT_OF_RANGE,
            details=full_details,
        )
        self.leaf_index = leaf_index
        self.leaf_count = leaf_count


class InvalidKeyLength(CommitKitException, ValueError):
    """Raised when a sparse tree key is not exactly the expected size."""

    def __init__(
        self,
        expected: int,
        actual: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        full_details["expected"] = expected
        full_details["actual"] = actual
        super().__init__(
            message=f"Key must be exactly {expected} bytes, got {actual}",
            code=ErrorCodes.INVALID_KEY_LENGTH,
            details=full_details,
        )
        self.expected = expected
        self.actual = actual


class InvalidBagSize(CommitKitException, ValueError):
    """Raised when a mountain range is configured with bag_size < 2."""

    def __init__(
        self,
        bag_size: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        full_details["bag_size"] = bag_size
        super().__init__(
            message=f"bag_size must be an integer >= 2, got {bag_size!r}",
            code=ErrorCodes.INVALID_BAG_SIZE,
            details=full_details,
        )
        self.bag_size = bag_size
