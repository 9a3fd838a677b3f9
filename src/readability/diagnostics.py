"""Raw HTTP response dumps for troubleshooting failed parser requests."""
import logging

import requests

_HTTP_VERSIONS = {10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}


def dump_response(response: requests.Response, body: bytes) -> str:
    """
    Render a response as raw HTTP text: status line, headers, blank line, body.

    Args:
        response: Response whose status line and headers are dumped
        body: Body bytes already read from the response

    Returns:
        Dump text, body decoded as UTF-8 with replacement characters
    """
    version = _HTTP_VERSIONS.get(getattr(response.raw, "version", None), "HTTP/1.1")
    lines = [f"{version} {response.status_code} {response.reason or ''}".rstrip()]
    for name, value in response.headers.items():
        lines.append(f"{name}: {value}")
    lines.append("")
    lines.append(body.decode("utf-8", errors="replace"))
    return "\r\n".join(lines)


class LoggingDiagnosticSink:
    """
    Diagnostic sink that writes response dumps to a logger.

    Dumps go to the stdlib logger named ``logger_name`` at WARNING level, so
    they are picked up by loguru when configure_logging() has installed its
    intercept handler.
    """

    def __init__(
        self,
        logger_name: str = "readability.diagnostics",
        level: int = logging.WARNING,
    ):
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def write(self, dump: str) -> None:
        self.logger.log(self.level, f"Raw parser response:\n{dump}")
