"""
Extract a single article through the Readability Parser API.

Usage:
    uv run python scripts/extract_article.py <article_url>

    # Send already-downloaded HTML so the parser skips its own fetch
    uv run python scripts/extract_article.py <article_url> --content-file page.html

    # Write the result to a file and dump raw failed responses to the log
    uv run python scripts/extract_article.py <article_url> --output article.json --dump-errors

Environment:
    READABILITY_TOKEN must be set (a .env file in the project root works).
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.log_config import configure_logging
from config.readability import ReadabilityConfig
from src.readability.base import ArticleParser
from src.readability.diagnostics import LoggingDiagnosticSink
from src.readability.errors import ReadabilityError
from src.readability.models import ParserResponse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract an article using the Readability Parser API"
    )
    parser.add_argument("url", help="Article URL to extract")
    parser.add_argument(
        "--content-file",
        type=str,
        default=None,
        help="Path to page HTML to send instead of letting the parser fetch it",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the extracted article as JSON to this path (default: stdout)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)",
    )
    parser.add_argument(
        "--dump-errors",
        action="store_true",
        help="Log raw HTTP responses of failed requests",
    )
    return parser


def run_extraction(
    parser: ArticleParser, url: str, content_file: Path | None = None
) -> ParserResponse:
    """
    Extract one article, sending saved page content when a file is given.

    Raises:
        ReadabilityError: If the parser request fails
        OSError: If the content file cannot be read
    """
    if content_file is None:
        return parser.extract(url)

    content = content_file.read_text(encoding="utf-8")
    logger.info(f"Sending {len(content)} characters of page content from {content_file}")
    return parser.extract_with_content(url, content)


def write_article(article: ParserResponse, output_path: Path | None) -> None:
    """Write the article as JSON to a file, or to stdout when no path is given."""
    article_json = json.dumps(article.model_dump(mode="json"), ensure_ascii=False, indent=2)

    if output_path is None:
        print(article_json)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(article_json + "\n", encoding="utf-8")
    logger.info(f"Wrote article to {output_path}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    args = build_parser().parse_args(argv)
    configure_logging(log_level=args.log_level)

    try:
        config = ReadabilityConfig()
        sink = LoggingDiagnosticSink() if args.dump_errors else None
        client = config.create_client(diagnostic_sink=sink)
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        content_file = Path(args.content_file) if args.content_file else None
        article = run_extraction(client, args.url, content_file)
    except ReadabilityError as e:
        if e.retryable:
            logger.warning(f"{e} (retryable)")
        else:
            logger.error(str(e))
        return 1
    except (ValueError, OSError) as e:
        logger.error(f"Extraction failed: {e}")
        return 1

    if article.has_more_pages:
        logger.info(
            f"Article has more pages: rendered {article.rendered_pages}/{article.total_pages}, "
            f"next_page_id={article.next_page_id}"
        )

    write_article(article, Path(args.output) if args.output else None)
    return 0


if __name__ == "__main__":
    exit_code = main()
    exit(exit_code)
