# tests/test_cli.py
from unittest.mock import MagicMock

import pytest
import requests
from typer.testing import CliRunner

from tenant_service.cli import config, utils_cli
from tenant_service.cli.main_cli import app

runner = CliRunner()
TENANT_ID = "7d444840-9dc0-11d1-b245-5ffdce74fad2"
APPLICATION_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"


def _response(status_code, payload=None):
    response = MagicMock(status_code=status_code)
    response.content = b"" if payload is None else b"{}"
    response.json.return_value = payload
    response.text = ""
    return response


@pytest.fixture
def fake_request(monkeypatch):
    monkeypatch.setattr(config, "TENANT_SERVICE_CLI_API_BASE_URL", "http://api.test")
    monkeypatch.setattr(config, "TENANT_SERVICE_CLI_ADMIN_API_KEY", "cli-key")
    request = MagicMock(return_value=_response(200, {}))
    monkeypatch.setattr(utils_cli.requests, "request", request)
    return request


def test_tenant_create_posts_secret_key(fake_request):
    fake_request.return_value = _response(201, {"tenant_id": TENANT_ID})

    result = runner.invoke(app, ["tenant", "create", "--secret-key", "s3cr3t"])

    assert result.exit_code == 0, result.output
    assert TENANT_ID in result.output
    fake_request.assert_called_once_with(
        "POST",
        "http://api.test/admin/tenants/",
        json={"secret_key": "s3cr3t"},
        headers={"X-Admin-API-Key": "cli-key"},
        timeout=30
    )


def test_application_list_calls_collection_route(fake_request):
    result = runner.invoke(app, ["application", "list", TENANT_ID])

    assert result.exit_code == 0, result.output
    assert fake_request.call_args.args == ("GET", f"http://api.test/admin/tenants/{TENANT_ID}/applications/")


def test_application_delete_expects_no_content(fake_request):
    fake_request.return_value = _response(204)

    result = runner.invoke(app, ["application", "delete", TENANT_ID, APPLICATION_ID])

    assert result.exit_code == 0, result.output
    assert fake_request.call_args.args == (
        "DELETE", f"http://api.test/admin/tenants/{TENANT_ID}/applications/{APPLICATION_ID}"
    )


def test_not_found_exits_with_error(fake_request):
    fake_request.return_value = _response(404, {"detail": {"error": "tenant_not_found"}})

    result = runner.invoke(app, ["tenant", "get", TENANT_ID])

    assert result.exit_code == 1
    assert "tenant_not_found" in result.output


def test_connection_error_exits_with_error(fake_request):
    fake_request.side_effect = requests.exceptions.ConnectionError("refused")

    result = runner.invoke(app, ["tenant", "delete", TENANT_ID])

    assert result.exit_code == 1
    assert "Could not connect" in result.output
