"""Tests for classify_status."""
import pytest

from src.readability.status import ResponseOutcome, classify_status


class TestClassifyStatus:
    """Tests for the status code to outcome mapping."""

    def test_200_is_success(self):
        assert classify_status(200) is ResponseOutcome.SUCCESS

    def test_504_is_timeout(self):
        assert classify_status(504) is ResponseOutcome.TIMEOUT

    @pytest.mark.parametrize("status_code", [500, 501, 502, 503, 505, 599])
    def test_other_5xx_is_transient(self, status_code):
        assert classify_status(status_code) is ResponseOutcome.TRANSIENT

    @pytest.mark.parametrize("status_code", [400, 401, 403, 404, 410, 429, 499])
    def test_4xx_is_terminal(self, status_code):
        assert classify_status(status_code) is ResponseOutcome.TERMINAL

    @pytest.mark.parametrize("status_code", [201, 204, 301, 302, 304])
    def test_non_200_success_and_redirect_codes_are_terminal(self, status_code):
        # Given: a status code that is not exactly 200
        # When/Then: it is treated as a terminal HTTP error
        assert classify_status(status_code) is ResponseOutcome.TERMINAL
