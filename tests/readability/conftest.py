"""Shared fixtures for Readability parser client tests."""
import json
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from src.readability.client import ReadabilityClient
from tests.readability.utils import TEST_TOKEN


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to JSON fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def parser_body(fixtures_dir: Path) -> bytes:
    """Load single-page parser response body."""
    return (fixtures_dir / "parser_response.json").read_bytes()


@pytest.fixture
def parser_payload(parser_body: bytes) -> dict:
    """Single-page parser response as a dict."""
    return json.loads(parser_body)


@pytest.fixture
def multipage_body(fixtures_dir: Path) -> bytes:
    """Load parser response for page 1 of a 3-page article."""
    return (fixtures_dir / "parser_response_multipage.json").read_bytes()


@pytest.fixture
def no_author_body(fixtures_dir: Path) -> bytes:
    """Load parser response with author, date_published and next_page_id absent."""
    return (fixtures_dir / "parser_response_no_author.json").read_bytes()


@pytest.fixture
def session() -> Mock:
    """Mock requests.Session used as the client's transport."""
    return Mock(spec=requests.Session)


@pytest.fixture
def diagnostic_sink() -> Mock:
    """Mock diagnostic sink."""
    return Mock()


@pytest.fixture
def client(session: Mock, diagnostic_sink: Mock) -> ReadabilityClient:
    """Client wired to the mock session and sink."""
    return ReadabilityClient(
        TEST_TOKEN, session=session, diagnostic_sink=diagnostic_sink
    )
