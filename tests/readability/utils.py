"""Utility functions for Readability parser client tests."""

import requests
from requests.structures import CaseInsensitiveDict

from src.readability.client import PARSER_URL


TEST_TOKEN = "test-token-0123456789"


def build_response(
    status_code: int,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    reason: str | None = None,
) -> requests.Response:
    """
    Build a real requests.Response whose body is already read.

    Args:
        status_code: HTTP status code
        body: Raw response body
        headers: Response headers (default: JSON content type)
        reason: HTTP reason phrase

    Returns:
        requests.Response usable as a context manager without a live connection
    """
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response._content_consumed = True
    response.headers = CaseInsensitiveDict(
        headers or {"Content-Type": "application/json"}
    )
    response.reason = reason
    response.url = PARSER_URL
    return response
