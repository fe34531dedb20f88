"""
Module 00 - Schemas
File: __init__.py

Purpose: Export the error models and exceptions used across commitkit.
"""

from .errors import (
    CommitError,
    CommitKitException,
    EmptyInputError,
    ErrorCodes,
    IndexOutOfRange,
    InvalidBagSize,
    InvalidKeyLength,
)

__all__ = [
    "CommitError",
    "CommitKitException",
    "EmptyInputError",
    "ErrorCodes",
    "IndexOutOfRange",
    "InvalidBagSize",
    "InvalidKeyLength",
]
