"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from svcinstall.cli._create_app import _create_app
    from svcinstall.utils.get_package_version import get_package_version
    from svcinstall.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"svcinstall {get_package_version()}")
        return 0

    configure_logging()

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        if e.code is None or isinstance(e.code, int):
            return e.code or 0
        typer.echo(str(e.code), err=True)
        return 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
