# tenant_service/cli/application_cli.py
import typer
from typing_extensions import Annotated

from .utils_cli import make_api_request

app = typer.Typer(
    name="application",
    help="Manage tenant applications via the admin API.",
    no_args_is_help=True
)

TenantIdArg = Annotated[str, typer.Argument(help="The identifier of the owning tenant.")]
ApplicationIdArg = Annotated[str, typer.Argument(help="The identifier of the application.")]


@app.command("create")
def create_application(
    tenant_id: TenantIdArg,
    name: Annotated[str, typer.Option(prompt="Application name", help="Name of the new application.")]
):
    """Create a new application under a tenant."""
    make_api_request(
        "POST",
        f"/admin/tenants/{tenant_id}/applications/",
        json_payload={"name": name},
        expected_status=201
    )


@app.command("get")
def get_application(tenant_id: TenantIdArg, application_id: ApplicationIdArg):
    """Get details for a specific application."""
    make_api_request("GET", f"/admin/tenants/{tenant_id}/applications/{application_id}")


@app.command("list")
def list_applications(tenant_id: TenantIdArg):
    """List every application of a tenant."""
    make_api_request("GET", f"/admin/tenants/{tenant_id}/applications/")


@app.command("update")
def update_application(
    tenant_id: TenantIdArg,
    application_id: ApplicationIdArg,
    name: Annotated[str, typer.Option(prompt="New application name", help="Replacement name.")]
):
    """Overwrite the name of an existing application."""
    make_api_request(
        "PUT",
        f"/admin/tenants/{tenant_id}/applications/{application_id}",
        json_payload={"name": name}
    )


@app.command("delete")
def delete_application(tenant_id: TenantIdArg, application_id: ApplicationIdArg):
    """Delete an application."""
    make_api_request(
        "DELETE",
        f"/admin/tenants/{tenant_id}/applications/{application_id}",
        expected_status=204,
        expect_json_response=False
    )


if __name__ == "__main__":
    app()
