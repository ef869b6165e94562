# tenant_service/cli/main_cli.py
import typer
from . import tenant_cli
from . import application_cli

app = typer.Typer(
    name="tenant-service",
    help="Tenant Service Command Line Interface.",
    no_args_is_help=True
)

app.add_typer(tenant_cli.app, name="tenant")
app.add_typer(application_cli.app, name="application")


@app.callback()
def main_callback():
    """
    Tenant Service admin CLI.
    Use 'tenant-service tenant --help' or 'tenant-service application --help'.
    """
    pass


def cli_entry_point():
    """Entry point function for console script registration in pyproject.toml"""
    app()


if __name__ == "__main__":
    cli_entry_point()
