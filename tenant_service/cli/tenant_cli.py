# tenant_service/cli/tenant_cli.py
import typer
from typing_extensions import Annotated

from .utils_cli import make_api_request

app = typer.Typer(
    name="tenant",
    help="Manage tenants via the admin API.",
    no_args_is_help=True
)


@app.command("create")
def create_tenant(
    secret_key: Annotated[
        str,
        typer.Option(prompt="Tenant secret key", hide_input=True, help="Secret key of the new tenant.")
    ]
):
    """Create a new tenant and print its generated identifier."""
    make_api_request(
        "POST",
        "/admin/tenants/",
        json_payload={"secret_key": secret_key},
        expected_status=201
    )


@app.command("get")
def get_tenant(
    tenant_id: Annotated[str, typer.Argument(help="The identifier of the tenant to retrieve.")]
):
    """Get details for a specific tenant."""
    make_api_request("GET", f"/admin/tenants/{tenant_id}")


@app.command("update")
def update_tenant(
    tenant_id: Annotated[str, typer.Argument(help="The identifier of the tenant to update.")],
    secret_key: Annotated[
        str,
        typer.Option(prompt="New tenant secret key", hide_input=True, help="Replacement secret key.")
    ]
):
    """Overwrite the secret key of an existing tenant."""
    make_api_request(
        "PUT",
        f"/admin/tenants/{tenant_id}",
        json_payload={"secret_key": secret_key}
    )


@app.command("delete")
def delete_tenant(
    tenant_id: Annotated[str, typer.Argument(help="The identifier of the tenant to delete.")]
):
    """Delete a tenant."""
    make_api_request(
        "DELETE",
        f"/admin/tenants/{tenant_id}",
        expected_status=204,
        expect_json_response=False
    )


if __name__ == "__main__":
    app()
