"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

from iss_passes.adapters.api_request_logger import (
    build_url_with_params,
    log_api_request,
    log_api_response,
)


class TestBuildUrlWithParams:
    """Tests for build_url_with_params function."""

    def test_when_no_params_then_returns_url(self) -> None:
        """Given no params, when building, then URL is unchanged."""
        assert build_url_with_params("https://api.ipify.org", None) == "https://api.ipify.org"

    def test_when_params_then_appends_sorted_query(self) -> None:
        """Given params, when building, then they are appended in sorted order."""
        url = build_url_with_params("https://example.test/json/", {"lon": -73.0, "lat": 41.0})

        assert url == "https://example.test/json/?lat=41.0&lon=-73.0"

    def test_when_url_has_query_then_extends_it(self) -> None:
        """Given a URL with a query string, when building, then params are joined with &."""
        url = build_url_with_params("https://example.test/?a=1", {"format": "json"})

        assert url == "https://example.test/?a=1&format=json"


class TestLogApiRequest:
    """Tests for log_api_request and log_api_response."""

    @patch("iss_passes.adapters.api_request_logger.logger")
    def test_when_logging_request_then_logs_method_and_url(self, mock_logger: MagicMock) -> None:
        """Given a request, when logging, then method and full URL are logged."""
        log_api_request("GET", "https://api.ipify.org", params={"format": "json"})

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert "GET https://api.ipify.org?format=json" in message

    @patch("iss_passes.adapters.api_request_logger.logger")
    def test_when_headers_given_then_logs_them(self, mock_logger: MagicMock) -> None:
        """Given headers, when logging, then they appear in the message."""
        log_api_request("GET", "https://api.ipify.org", headers={"Accept": "application/json"})

        message = mock_logger.info.call_args[0][0]
        assert "Headers: Accept: application/json" in message

    @patch("iss_passes.adapters.api_request_logger.logger")
    def test_when_logging_response_then_logs_status_and_size(
        self, mock_logger: MagicMock
    ) -> None:
        """Given a response, when logging, then status and body length are logged."""
        log_api_response("http://ipwho.is/1.2.3.4", 200, 512)

        message = mock_logger.info.call_args[0][0]
        assert message == "API Response: http://ipwho.is/1.2.3.4 -> 200 (512 bytes)"
