# src/featuredemo/api.py
"""
Stubbed fetch reporting through a completion handler.

Requests are ``httpx.Request`` objects. They are built so the call site looks
like a real client, but nothing is ever sent over a transport.
"""

import logging
from typing import Callable, Optional

import httpx

from .enums import APIError
from .result import Failure, Result, Success

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_COUNT = 1


def build_request(url: str, method: str = "GET") -> httpx.Request:
    """Construct (but do not send) a request for ``url``."""
    return httpx.Request(method, url)


def fetch_result(
    request: Optional[httpx.Request],
    success_count: int = DEFAULT_SUCCESS_COUNT,
) -> Result:
    """Return ``Success(success_count)`` for a request, ``Failure(OTHERS)`` without one."""
    if request is None:
        return Failure(APIError.OTHERS)
    logger.info("Request %s %s", request.method, request.url)
    return Success(success_count)


def fetch(
    request: Optional[httpx.Request],
    completion: Callable[[Result], None],
    success_count: int = DEFAULT_SUCCESS_COUNT,
) -> None:
    """Report the outcome of ``fetch_result`` to ``completion``.

    The handler runs exactly once and before this function returns.
    """
    if request is not None:
        print("urlRequest", request.url)
    completion(fetch_result(request, success_count))
