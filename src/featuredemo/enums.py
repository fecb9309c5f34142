# src/featuredemo/enums.py
"""
Enumeration types for the featuredemo package.
"""

from enum import Enum


class ExampleError(Enum):
    """Generic error kinds used by the dispatch demo."""
    A_ERROR = "aError"
    B_ERROR = "bError"
    C_ERROR = "cError"


class UserError(Enum):
    """Validation failures for User values."""
    INVALID_ID = "invalidId"


class APIError(Enum):
    """Failure kinds reported by the stubbed fetch."""
    CONNECTION_ERROR = "connectionError"
    DECODE_ERROR = "decodeError"
    INVALID_REQUEST = "invalidRequest"
    INVALID_RESPONSE = "invalidResponse"
    OTHERS = "others"
