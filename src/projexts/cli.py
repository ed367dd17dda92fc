"""Command-line interface for projexts."""

import logging

import typer
from typer_di import TyperDI

from projexts import __version__
from projexts.cli_commands import config_cmd, launch, shortcut
from projexts.utils.aliases import register_command_aliases

app = TyperDI(help="projexts: named shortcuts for the commands you run every day.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"projexts {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
):
    """Manage and launch project shortcuts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


commands = {}
commands.update(shortcut.register(app))
commands.update(launch.register(app))
commands.update(config_cmd.register(app))

register_command_aliases(app, commands)


if __name__ == "__main__":
    app()
