"""Service Typer app factory."""

from pathlib import Path

import typer

from svcinstall.api.service.cmd_install import cmd_install
from svcinstall.api.service.cmd_render import cmd_render
from svcinstall.api.service.cmd_uninstall import cmd_uninstall
from svcinstall.cli._handle_stage_result import _handle_stage_result

_CONFIG_HELP = "Service config file (default: $SVCINSTALL_CONFIG or ~/.svcinstall/config.json)"


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="System service install/uninstall",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd(
        config: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),  # noqa: B008
    ) -> None:
        """Create the service account, write configs, enable and start the service."""
        _handle_stage_result(cmd_install)(config_path=config)

    @app.command(name="uninstall")
    def uninstall_cmd(
        config: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),  # noqa: B008
    ) -> None:
        """Stop and disable the service and remove generated files."""
        _handle_stage_result(cmd_uninstall)(config_path=config)

    @app.command(name="render")
    def render_cmd(
        config: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),  # noqa: B008
    ) -> None:
        """Print the files install would write, without changing the system."""
        _handle_stage_result(cmd_render)(config_path=config)

    return app
