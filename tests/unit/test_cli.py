from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console
from typer.testing import CliRunner

from status_api import cli
from status_api.cli import cli_app
from status_api.core.exceptions import UpstreamError
from status_api.schemas.status import ServiceStatus, StatusResponse

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep rich tables from wrapping cell values in the captured output."""
    monkeypatch.setattr(cli, "console", Console(width=200))


def _report() -> StatusResponse:
    return StatusResponse(
        timestamp="2024-01-01T00:00:00.000Z",
        overall_status="operational",
        services=[
            ServiceStatus(
                id="api-coroners",
                name="API - Coroners",
                description="Coroners API service",
                status="operational",
                uptime_percentage=99.9,
                last_checked="2024-01-01T00:00:00.000Z",
            )
        ],
    )


def test_directory_command():
    result = runner.invoke(cli_app, ["directory"])
    assert result.exit_code == 0
    assert "api-coroners" in result.output
    assert "veolia-echo" in result.output


def test_status_command():
    with patch("status_api.services.status.build_status_report", new=AsyncMock(return_value=_report())):
        result = runner.invoke(cli_app, ["status"])
    assert result.exit_code == 0
    assert "operational" in result.output
    assert "api-coroners" in result.output


def test_status_command_upstream_failure():
    failing = AsyncMock(side_effect=UpstreamError("Wormly API returned error code: 5"))
    with patch("status_api.services.status.build_status_report", new=failing):
        result = runner.invoke(cli_app, ["status"])
    assert result.exit_code == 1
    assert "error code: 5" in result.output


def test_hosts_command():
    payload = {"errorcode": 0, "status": [{"hostid": 107401, "name": "Coroners"}, {"hostid": 1, "name": "Other"}]}
    with patch("status_api.services.wormly.WormlyClient.get_host_status", new=AsyncMock(return_value=payload)):
        result = runner.invoke(cli_app, ["hosts"])
    assert result.exit_code == 0
    assert "107401" in result.output
    assert "api-coroners" in result.output


async def test_cli_client_honours_timeout_settings(monkeypatch):
    monkeypatch.setattr(cli.settings, "http_read_timeout", 1.0)
    monkeypatch.setattr(cli.settings, "http_total_timeout", 2.5)
    client = cli._client()
    assert client._client.timeout.read == 1.0
    assert client.deadline == 2.5
    await client.close()
