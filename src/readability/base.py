"""Protocols for the Readability Parser client and its collaborators."""
from typing import Protocol
from .models import ParserResponse


class ArticleParser(Protocol):
    """
    Protocol for article parsing services using structural subtyping.

    Any class that implements extract() and extract_with_content() with the
    correct signatures can be used as an ArticleParser. ReadabilityClient is
    the production implementation; tests and callers can substitute their own.

    Example:
        class FakeParser:  # No inheritance needed!
            def extract(self, url: str) -> ParserResponse:
                return ParserResponse(...)

            def extract_with_content(self, url: str, content: str) -> ParserResponse:
                return self.extract(url)

        # FakeParser satisfies ArticleParser Protocol
    """

    def extract(self, url: str) -> ParserResponse:
        """
        Extract an article, letting the parser fetch the page itself.

        Args:
            url: Page URL

        Returns:
            ParserResponse decoded from the parser's response

        Raises:
            ValueError: If url is empty
            ReadabilityError: For transport, HTTP status and decoding failures
        """
        ...

    def extract_with_content(self, url: str, content: str) -> ParserResponse:
        """
        Extract an article from page content the caller already fetched.

        Args:
            url: Page URL
            content: Raw page content (e.g. HTML) sent along with the request

        Returns:
            ParserResponse decoded from the parser's response

        Raises:
            ValueError: If url is empty
            ReadabilityError: For transport, HTTP status and decoding failures
        """
        ...


class DiagnosticSink(Protocol):
    """Receiver for raw HTTP response dumps written when a request fails."""

    def write(self, dump: str) -> None:
        """Record a raw response dump."""
        ...
