"""HTTP status classification for Readability Parser API responses."""
from enum import Enum


class ResponseOutcome(str, Enum):
    """Outcome kinds a parser response can map to."""

    SUCCESS = "success"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    TERMINAL = "terminal"


def classify_status(status_code: int) -> ResponseOutcome:
    """
    Map an HTTP status code to a response outcome.

    504 is split out from the other 5xx codes: it means the parser's own
    fetch of the target page timed out.

    Args:
        status_code: HTTP status code returned by the parser endpoint

    Returns:
        ResponseOutcome for the status code

    Example:
        >>> classify_status(200)
        <ResponseOutcome.SUCCESS: 'success'>
        >>> classify_status(503)
        <ResponseOutcome.TRANSIENT: 'transient'>
    """
    if status_code == 200:
        return ResponseOutcome.SUCCESS
    if status_code == 504:
        return ResponseOutcome.TIMEOUT
    if status_code >= 500:
        return ResponseOutcome.TRANSIENT
    return ResponseOutcome.TERMINAL
