"""Client for the Readability Parser API."""
import asyncio
import logging
from urllib.parse import quote, quote_plus

import requests

from .base import DiagnosticSink
from .diagnostics import dump_response
from .errors import (
    ParserHTTPError,
    TransientError,
    TransportError,
    UpstreamTimeoutError,
)
from .models import ParserResponse, parse_response
from .status import ResponseOutcome, classify_status


logger = logging.getLogger(__name__)

PARSER_URL = "https://readability.com/api/content/v1/parser"


class ReadabilityClient:
    """
    Extracts articles through the Readability Parser API.

    Each call is one independent request/response exchange:
    1. Send the page URL and token to the parser endpoint
       (GET, or POST when page content is supplied)
    2. Classify the response by status code
    3. Decode a 200 body into a ParserResponse, or raise the matching error

    The client only holds immutable configuration, so one instance can be
    shared across threads and tasks. Nothing is retried internally; callers
    can retry on ``error.retryable`` (set for TransientError).

    Example:
        client = ReadabilityClient(token="...")
        try:
            article = client.extract("https://example.com/story")
        except TransientError:
            ...  # try again later
        print(article.title, article.word_count)

        # Skip the parser's own fetch when the page is already downloaded
        article = client.extract_with_content(url, html)
    """

    def __init__(
        self,
        token: str,
        *,
        parser_url: str = PARSER_URL,
        timeout: float = 30.0,
        session: requests.Session | None = None,
        diagnostic_sink: DiagnosticSink | None = None,
    ):
        """
        Initialize the client. No network activity happens here.

        Args:
            token: Readability API token
            parser_url: Parser endpoint URL
            timeout: Transport timeout in seconds
            session: Optional requests.Session to send through. Without one,
                each call uses requests.request() directly.
            diagnostic_sink: Optional sink receiving raw dumps of failed responses

        Raises:
            ValueError: If token is empty
        """
        if not token or not token.strip():
            raise ValueError("Readability token cannot be empty")

        self._token = token
        self.parser_url = parser_url
        self.timeout = timeout
        self._session = session
        self.diagnostic_sink = diagnostic_sink

    def __repr__(self) -> str:
        return f"ReadabilityClient(parser_url={self.parser_url!r}, timeout={self.timeout})"

    def extract(self, url: str) -> ParserResponse:
        """
        Extract an article, letting the parser fetch the page.

        Args:
            url: Page URL

        Returns:
            ParserResponse decoded from the parser's response

        Raises:
            ValueError: If url is empty
            TransportError: If the request fails or the body cannot be read
            UpstreamTimeoutError: On HTTP 504
            TransientError: On any other 5xx
            ParserHTTPError: On any other non-200 status
            DecodeError: If a 200 body cannot be decoded
        """
        url = _validate_page_url(url)
        return self._send("GET", url)

    def extract_with_content(self, url: str, content: str | None) -> ParserResponse:
        """
        Extract an article from page content the caller already fetched.

        The content is POSTed as the ``content`` form field so the parser can
        skip its own fetch. Empty content behaves exactly like extract().

        Args:
            url: Page URL
            content: Raw page content, typically HTML

        Returns:
            ParserResponse decoded from the parser's response

        Raises:
            Same as extract()
        """
        url = _validate_page_url(url)
        if not content:
            logger.debug("No content supplied, falling back to GET", extra={"url": url})
            return self._send("GET", url)
        return self._send("POST", url, data={"content": content})

    async def extract_async(self, url: str) -> ParserResponse:
        """Run extract() on a worker thread."""
        return await asyncio.to_thread(self.extract, url)

    async def extract_with_content_async(
        self, url: str, content: str | None
    ) -> ParserResponse:
        """Run extract_with_content() on a worker thread."""
        return await asyncio.to_thread(self.extract_with_content, url, content)

    def _send(
        self, method: str, url: str, data: dict[str, str] | None = None
    ) -> ParserResponse:
        """Send one request to the parser and handle its response."""
        params = {"url": url, "token": self._token}
        sender = self._session if self._session is not None else requests

        logger.debug(f"Sending {method} to parser", extra={"url": url})
        try:
            response = sender.request(
                method,
                self.parser_url,
                params=params,
                data=data,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            detail = redact_token(str(e), self._token)
            logger.error(f"Parser request failed: {detail}", extra={"url": url})
            raise TransportError(url, e, detail) from e

        # Closing the response releases the connection on every exit path
        with response:
            return self._handle_response(url, response)

    def _handle_response(self, url: str, response: requests.Response) -> ParserResponse:
        """Classify a response by status code and decode or raise accordingly."""
        status_code = response.status_code
        outcome = classify_status(status_code)
        body = _read_body(url, response, self._token)

        if outcome is ResponseOutcome.SUCCESS:
            article = parse_response(url, body)
            logger.info(
                f"Extracted: {article.title[:100]}",
                extra={"url": url, "word_count": article.word_count},
            )
            return article

        self._write_diagnostics(response, body)

        if outcome is ResponseOutcome.TIMEOUT:
            logger.warning("Parser timed out fetching page", extra={"url": url})
            raise UpstreamTimeoutError(url)

        if outcome is ResponseOutcome.TRANSIENT:
            logger.warning(
                f"Transient parser error: {status_code}",
                extra={"url": url, "status_code": status_code},
            )
            raise TransientError(url, status_code)

        text = body.decode("utf-8", errors="replace")
        logger.error(
            f"Parser returned HTTP {status_code}",
            extra={"url": url, "status_code": status_code},
        )
        raise ParserHTTPError(url, status_code, text)

    def _write_diagnostics(self, response: requests.Response, body: bytes) -> None:
        if self.diagnostic_sink is None:
            return
        self.diagnostic_sink.write(dump_response(response, body))


def _validate_page_url(url: str) -> str:
    """
    Validate and normalize a page URL.

    Only emptiness is checked; well-formedness is left to the parser.

    Raises:
        ValueError: If url is empty or whitespace
    """
    if not url or not url.strip():
        raise ValueError("URL cannot be empty")
    return url.strip()


def _read_body(url: str, response: requests.Response, token: str) -> bytes:
    """
    Read the full response body.

    Raises:
        TransportError: If reading the body fails mid-stream
    """
    try:
        return response.content
    except requests.RequestException as e:
        detail = redact_token(str(e), token)
        logger.error(f"Failed to read parser response: {detail}", extra={"url": url})
        raise TransportError(url, e, detail) from e


def redact_token(text: str, token: str) -> str:
    """
    Mask a token in text, including its URL-encoded forms.

    requests puts the full request URL, query string included, into its
    connection error messages.
    """
    for form in {token, quote_plus(token), quote(token, safe="")}:
        text = text.replace(form, "***")
    return text
