"""CLI commands that manage the stored shortcuts."""

from typing import Any, Callable, Dict, List, Optional

import typer
from typer_di import Depends
from yaspin import yaspin

from projexts.messages import shortcut as msg
from projexts.utils.decorators import EXIT_NOT_FOUND, report_errors
from projexts.utils.dependencies import ProjextsCtx, get_context
from projexts.utils.typer import add_typer_block_message

PASSTHROUGH = {"ignore_unknown_options": True}


def register(app: typer.Typer) -> Dict[str, Callable[..., Any]]:
    @app.command(context_settings=PASSTHROUGH)
    @report_errors()
    def add(
        name: str = typer.Argument(..., help="Shortcut name"),
        command: List[str] = typer.Argument(..., help="Program or path followed by its arguments"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Add a shortcut for a command."""
        ctx.ensure_store()
        typer.echo(msg.SHORTCUT_ADDED.format(name, " ".join(command)))
        with yaspin(text=msg.RESOLVING_PATHS, color=typer.colors.GREEN) as spinner:
            shortcut = ctx.store.add(name, command)
            spinner.ok("✔")
        typer.secho(f"✔ {shortcut.name}: {shortcut.display_command()}", fg=typer.colors.GREEN)

    @app.command()
    @report_errors()
    def remove(
        name: str = typer.Argument(..., help="Shortcut name"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Remove every shortcut with the given name."""
        ctx.ensure_store()
        removed = ctx.store.remove(name)
        if not removed:
            typer.secho(msg.SHORTCUT_NOT_FOUND.format(name), fg=typer.colors.YELLOW)
            raise typer.Exit(code=EXIT_NOT_FOUND)
        typer.secho(f"✔ {msg.SHORTCUT_REMOVED.format(removed, name)}", fg=typer.colors.GREEN)

    @app.command(name="list")
    @report_errors()
    def list_shortcuts(ctx: ProjextsCtx = Depends(get_context)):
        """List all shortcuts in storage order."""
        ctx.ensure_store()
        shortcuts = ctx.store.list()
        if not shortcuts:
            typer.secho(msg.NO_SHORTCUTS_FOUND, fg=typer.colors.YELLOW)
            raise typer.Exit(code=0)

        add_typer_block_message(
            header="Shortcuts",
            subheader="",
            messages=[f"{s.name}: {s.display_command()}" for s in shortcuts],
            use_separator=False,
        )

    @app.command()
    @report_errors()
    def show(
        name: str = typer.Argument(..., help="Shortcut name"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Show the command stored for a shortcut."""
        ctx.ensure_store()
        shortcut = ctx.store.get(name)
        add_typer_block_message(
            header=shortcut.name,
            subheader="",
            messages=[f"{pos}. {token}" for pos, token in enumerate(shortcut.command)],
        )

    @app.command(context_settings=PASSTHROUGH)
    @report_errors()
    def update(
        name: str = typer.Argument(..., help="Shortcut name"),
        command: Optional[List[str]] = typer.Argument(None, help="Replacement command"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Replace the command of a shortcut."""
        ctx.ensure_store()
        new_command = command or None
        with yaspin(text=msg.RESOLVING_PATHS, color=typer.colors.GREEN) as spinner:
            shortcut = ctx.store.update(name, new_command)
            spinner.ok("✔")

        if new_command is None:
            typer.secho(msg.SHORTCUT_UNCHANGED.format(name), fg=typer.colors.YELLOW)
        else:
            typer.secho(
                f"✔ {msg.SHORTCUT_UPDATED.format(name, shortcut.display_command())}",
                fg=typer.colors.GREEN,
            )

    @app.command()
    @report_errors()
    def reset(
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Delete the shortcut store."""
        path = ctx.store.path
        if not yes and not typer.confirm(msg.CONFIRM_RESET.format(path)):
            typer.echo(msg.RESET_CANCELLED)
            raise typer.Exit(code=0)

        if ctx.store.reset():
            typer.secho(f"✔ {msg.STORE_RESET.format(path)}", fg=typer.colors.GREEN)
        else:
            typer.secho(msg.STORE_ALREADY_GONE.format(path), fg=typer.colors.YELLOW)

    return {
        "add": add,
        "remove": remove,
        "list_shortcuts": list_shortcuts,
        "show": show,
        "update": update,
        "reset": reset,
    }
