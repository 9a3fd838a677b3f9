"""Readability Parser client configuration."""
import os

from src.readability.base import DiagnosticSink
from src.readability.client import PARSER_URL, ReadabilityClient


class ReadabilityConfig:
    """
    Parser client settings read from the environment.

    Constructor arguments take priority over environment variables:
        READABILITY_TOKEN: API token (required to build a client)
        READABILITY_PARSER_URL: Parser endpoint (default: public parser URL)
        READABILITY_TIMEOUT: Transport timeout in seconds (default: 30)
    """

    def __init__(
        self,
        token: str | None = None,
        parser_url: str | None = None,
        timeout: float | None = None,
    ):
        self.token: str = token or os.getenv("READABILITY_TOKEN", "")
        self.parser_url: str = parser_url or os.getenv(
            "READABILITY_PARSER_URL", PARSER_URL
        )
        if timeout is None:
            raw_timeout = os.getenv("READABILITY_TIMEOUT", "30")
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ValueError(
                    f"READABILITY_TIMEOUT must be a number, got: {raw_timeout!r}"
                ) from e
        if timeout <= 0:
            raise ValueError(f"Timeout must be positive, got: {timeout}")
        self.timeout: float = timeout

    def create_client(
        self, diagnostic_sink: DiagnosticSink | None = None
    ) -> ReadabilityClient:
        """
        Build a ReadabilityClient from these settings.

        Raises:
            ValueError: If no token is configured
        """
        if not self.token:
            raise ValueError(
                "Readability token is not configured (set READABILITY_TOKEN)"
            )
        return ReadabilityClient(
            self.token,
            parser_url=self.parser_url,
            timeout=self.timeout,
            diagnostic_sink=diagnostic_sink,
        )
