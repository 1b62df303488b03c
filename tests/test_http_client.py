"""Tests for the shared JSON HTTP client."""

import logging
from unittest.mock import patch

import pytest

from iss_passes.adapters.http_client import JsonHttpClient
from iss_passes.domain.errors import StatusError
from tests.fakes import FakeResponse, FakeSession, json_response


@pytest.mark.asyncio
async def test_get_json_decodes_body(fake_session: FakeSession) -> None:
    """Given a 200 JSON response, when fetching, then the decoded body is returned."""
    fake_session.responses.append(json_response({"ip": "1.2.3.4"}))
    client = JsonHttpClient(session=fake_session)  # type: ignore[arg-type]

    data = await client.get_json("https://api.ipify.org", "IP", params={"format": "json"})

    assert data == {"ip": "1.2.3.4"}
    assert fake_session.calls[0]["headers"] == {"Accept": "application/json"}


@pytest.mark.asyncio
async def test_get_json_keeps_full_body_in_error(fake_session: FakeSession) -> None:
    """Given a long error body, when fetching, then the error keeps it untruncated."""
    body = "x" * 1000
    fake_session.responses.append(FakeResponse(status=404, body=body))
    client = JsonHttpClient(session=fake_session)  # type: ignore[arg-type]

    with pytest.raises(StatusError) as exc_info:
        await client.get_json("https://example.test", "IP")

    assert exc_info.value.body == body
    assert exc_info.value.subject == "IP"
    assert str(exc_info.value).endswith(body)


@pytest.mark.asyncio
async def test_get_json_logs_truncated_warning_on_error(
    fake_session: FakeSession, caplog: pytest.LogCaptureFixture
) -> None:
    """Given an error response, when fetching, then a warning with a truncated body is logged."""
    fake_session.responses.append(FakeResponse(status=502, body="y" * 1000))
    client = JsonHttpClient(session=fake_session)  # type: ignore[arg-type]

    with caplog.at_level(logging.WARNING, logger="iss_passes.adapters.http_client"):
        with pytest.raises(StatusError):
            await client.get_json("https://example.test", "coordinates")

    assert "status 502" in caplog.text
    assert "y" * 200 in caplog.text
    assert "y" * 201 not in caplog.text


@pytest.mark.asyncio
async def test_get_json_logs_requests_only_when_enabled(fake_session: FakeSession) -> None:
    """Given request logging toggled, when fetching, then the request logger is used accordingly."""
    fake_session.responses.extend([json_response({}), json_response({})])
    quiet = JsonHttpClient(session=fake_session)  # type: ignore[arg-type]
    verbose = JsonHttpClient(session=fake_session, log_requests=True)  # type: ignore[arg-type]

    with (
        patch("iss_passes.adapters.http_client.log_api_request") as mock_request,
        patch("iss_passes.adapters.http_client.log_api_response") as mock_response,
    ):
        await quiet.get_json("https://example.test", "IP")
        mock_request.assert_not_called()
        mock_response.assert_not_called()

        await verbose.get_json("https://example.test", "IP", params={"format": "json"})
        mock_request.assert_called_once_with(
            "GET",
            "https://example.test",
            params={"format": "json"},
            headers={"Accept": "application/json"},
        )
        mock_response.assert_called_once_with("https://example.test", 200, 2)
