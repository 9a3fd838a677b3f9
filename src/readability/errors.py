"""Exceptions raised by the Readability Parser client."""


class ReadabilityError(Exception):
    """Base class for all parser client errors."""

    retryable = False

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class TransportError(ReadabilityError):
    """The request could not be sent or the response could not be read."""

    def __init__(self, url: str, cause: Exception, detail: str | None = None):
        # detail replaces str(cause) when the cause text must be cleaned first
        detail = str(cause) if detail is None else detail
        super().__init__(url, f"readability: HTTP error ({url}): {detail}")
        self.cause = cause


class UpstreamTimeoutError(ReadabilityError):
    """The parser timed out fetching the target page (HTTP 504)."""

    def __init__(self, url: str):
        super().__init__(url, f"readability: upstream timeout ({url})")


class TransientError(ReadabilityError):
    """
    Server-side failure (5xx other than 504), probably worth retrying.

    The response body is discarded and not attached.
    """

    retryable = True

    def __init__(self, url: str, status_code: int):
        super().__init__(
            url,
            f"readability: transient error ({url}): {status_code}, maybe try again",
        )
        self.status_code = status_code


class ParserHTTPError(ReadabilityError):
    """Any other non-200 response."""

    def __init__(self, url: str, status_code: int, body: str = ""):
        super().__init__(
            url, f"readability: HTTP error ({url}): {status_code}, {body}"
        )
        self.status_code = status_code
        self.body = body


class DecodeError(ReadabilityError):
    """A 200 response whose body could not be decoded."""

    def __init__(self, url: str, reason: str):
        super().__init__(url, f"readability: JSON error ({url}): {reason}")
        self.reason = reason
