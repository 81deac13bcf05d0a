"""
Horizon Error Model

This module provides the error handling framework for the Horizon client,
covering request validation failures, unset required identifiers and the
transport and parsing errors raised by the HTTP client.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Horizon client error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2
    INVALID_URL = 3

    # Request building errors (100-199)
    INVALID_PARAMETER = 100
    INVALID_CURSOR = 101
    INVALID_LIMIT = 102
    INVALID_ASSET_CODE = 103
    INVALID_PUBLIC_KEY = 104
    INVALID_IDENTIFIER = 105
    UNSET_IDENTIFIER = 106

    # Network errors (200-299)
    NETWORK_ERROR = 200
    CONNECTION_FAILED = 201
    TIMEOUT = 202

    # Response errors (300-399)
    BAD_STATUS = 300
    NOT_FOUND = 301
    RATE_LIMITED = 302
    INVALID_JSON = 303


class HorizonError(Exception):
    """
    Base class for all Horizon client errors.

    Carries a machine readable code next to the human readable message.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Horizon error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ValidationError(HorizonError, ValueError):
    """A request parameter violated its documented constraint."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_PARAMETER,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UnsetIdentifierError(HorizonError):
    """A required identifier was read before its setter was called."""

    def __init__(self, name: str):
        super().__init__(
            f"{name} must be set before the request can be built",
            ErrorCode.UNSET_IDENTIFIER,
            {"identifier": name},
        )
        self.name = name


class HorizonNetworkError(HorizonError):
    """Network-related errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NETWORK_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class HorizonResponseError(HorizonError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int, body: str, url: Optional[str] = None):
        if status_code == 404:
            code = ErrorCode.NOT_FOUND
        elif status_code == 429:
            code = ErrorCode.RATE_LIMITED
        else:
            code = ErrorCode.BAD_STATUS
        details: Dict[str, Any] = {"status_code": status_code}
        if url:
            details["url"] = url
        super().__init__(f"Horizon returned HTTP {status_code}", code, details)
        self.status_code = status_code
        self.body = body


class ResponseParseError(HorizonError):
    """A response body could not be parsed into its record type."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_JSON, details, cause)


__all__ = [
    "ErrorCode",
    "HorizonError",
    "ValidationError",
    "UnsetIdentifierError",
    "HorizonNetworkError",
    "HorizonResponseError",
    "ResponseParseError",
]
