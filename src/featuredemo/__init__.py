# src/featuredemo/__init__.py
"""
featuredemo: small, self-contained demonstrations of language features
printed to the console
"""

__version__ = "0.1.0"

from .enums import APIError, ExampleError, UserError
from .exceptions import FeatureDemoError, InvalidUserError, LiteralSyntaxError, ResultError
from .config import DemoConfig
from .result import Failure, Result, Success, catching
from .mapping import compact_map_values, parse_int
from .multiples import is_multiple
from .raw_strings import RawLiteral, raw
from .models import Area, User, try_messages
from .api import build_request, fetch, fetch_result
from .resources import read_resource, resource_path
from .demos import ROUTINES, run_all

__all__ = [
    "APIError",
    "Area",
    "DemoConfig",
    "ExampleError",
    "Failure",
    "FeatureDemoError",
    "InvalidUserError",
    "LiteralSyntaxError",
    "ROUTINES",
    "RawLiteral",
    "Result",
    "ResultError",
    "Success",
    "User",
    "UserError",
    "build_request",
    "catching",
    "compact_map_values",
    "fetch",
    "fetch_result",
    "is_multiple",
    "parse_int",
    "raw",
    "read_resource",
    "resource_path",
    "run_all",
    "try_messages",
]
