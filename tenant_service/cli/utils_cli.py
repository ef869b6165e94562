# tenant_service/cli/utils_cli.py
import requests
import typer
import json
from typing import Optional, Dict, Any, Union, List

from . import config


def make_api_request(
    method: str,
    endpoint: str,
    json_payload: Optional[Dict[str, Any]] = None,
    expected_status: Union[int, List[int]] = 200,
    expect_json_response: bool = True
) -> Any:
    """
    Makes an HTTP request to the tenant service admin API.

    Sends the admin API key when configured, prints the response and exits
    with code 1 on any unexpected status or connection failure.
    """
    full_url = f"{config.TENANT_SERVICE_CLI_API_BASE_URL}{endpoint}"
    headers: Dict[str, str] = {}

    if config.TENANT_SERVICE_CLI_ADMIN_API_KEY:
        headers["X-Admin-API-Key"] = config.TENANT_SERVICE_CLI_ADMIN_API_KEY
    else:
        typer.secho(
            "CLI: Warning - ADMIN_API_KEY not set in .env for CLI. Admin API calls might fail.",
            fg=typer.colors.YELLOW
        )

    typer.echo(f"CLI: {method.upper()} {full_url}")
    if json_payload:
        typer.echo(f"CLI: JSON Payload: {json.dumps(json_payload, indent=2)}")

    try:
        response = requests.request(
            method,
            full_url,
            json=json_payload,
            headers=headers,
            timeout=30
        )
    except requests.exceptions.ConnectionError as e:
        typer.secho(
            f"CLI: Connection Error - Could not connect to API at {full_url}. Is the server running? Error: {e}",
            fg=typer.colors.RED
        )
        raise typer.Exit(code=1)
    except requests.exceptions.RequestException as e:
        typer.secho(f"CLI: Request Error - {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(f"CLI: Response Status: {response.status_code}")

    expected_statuses = [expected_status] if isinstance(expected_status, int) else expected_status

    if response.status_code not in expected_statuses:
        err_msg = f"CLI: API Error - Expected status {expected_status}, got {response.status_code}."
        try:
            err_data = response.json()
            err_msg += f" Detail: {err_data.get('detail', response.text)}"
        except ValueError:
            err_msg += f" Raw response: {response.text}"
        typer.secho(err_msg, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not expect_json_response or (not response.content and response.status_code == 204):
        typer.secho(f"CLI: Success (Status {response.status_code}).", fg=typer.colors.GREEN)
        return None

    try:
        data = response.json()
    except ValueError:
        typer.secho(
            f"CLI: Error - Could not decode JSON response. Raw text: {response.text}",
            fg=typer.colors.RED
        )
        raise typer.Exit(code=1)
    typer.secho("CLI: Response JSON:", fg=typer.colors.CYAN)
    typer.echo(json.dumps(data, indent=2))
    return data
