"""CLI commands that launch what a shortcut points at."""

from typing import Any, Callable, Dict, List, Optional

import typer
from typer_di import Depends

from projexts.messages import launch as msg
from projexts.utils.decorators import EXIT_FAILURE, EXIT_NOT_FOUND, report_errors
from projexts.utils.dependencies import ProjextsCtx, get_context


def register(app: typer.Typer) -> Dict[str, Callable[..., Any]]:
    @app.command(context_settings={"ignore_unknown_options": True})
    @report_errors()
    def run(
        name: str = typer.Argument(..., help="Shortcut name"),
        extra: Optional[List[str]] = typer.Argument(None, help="Arguments appended to the command"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Run a shortcut's command, appending any extra arguments."""
        ctx.ensure_store()
        shortcut = ctx.store.get(name)
        argv = ctx.resolver.build_argv(shortcut, extra or [])
        typer.echo(msg.RUNNING_COMMAND.format(" ".join(argv)))

        returncode = ctx.resolver.run(shortcut, extra or [])
        if returncode:
            typer.secho(msg.COMMAND_EXITED_WITH.format(returncode), fg=typer.colors.YELLOW)

    @app.command()
    @report_errors()
    def open_folder(
        name: str = typer.Argument(..., help="Shortcut name"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Open the folder of a shortcut's first path in the file manager."""
        ctx.ensure_store()
        shortcut = ctx.store.get(name)
        directory = ctx.resolver.folder_of(shortcut)
        typer.echo(msg.OPENING_FOLDER.format(directory))
        ctx.resolver.open_folder(shortcut)

    @app.command()
    @report_errors()
    def open_file(
        name: str = typer.Argument(..., help="Shortcut name"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Open every file named in a shortcut's command."""
        ctx.ensure_store()
        shortcut = ctx.store.get(name)
        report = ctx.resolver.open_file(shortcut)

        for token in report.skipped:
            typer.secho(msg.SKIPPING_TOKEN.format(token), fg=typer.colors.YELLOW)
        for token in report.opened:
            typer.secho(f"✔ {msg.OPENING_FILE.format(token)}", fg=typer.colors.GREEN)
        if not report.opened:
            typer.secho(msg.NO_FILES_OPENED.format(name), fg=typer.colors.YELLOW)
            raise typer.Exit(code=EXIT_NOT_FOUND)

    @app.command()
    @report_errors()
    def git_push(
        name: str = typer.Argument(..., help="Shortcut name"),
        message: str = typer.Option(..., "--message", "-m", help="Commit message"),
        ctx: ProjextsCtx = Depends(get_context),
    ):
        """Stage, commit and push the repository a shortcut lives in."""
        ctx.ensure_store()
        shortcut = ctx.store.get(name)
        report = ctx.resolver.git_push(shortcut, message)

        for step in report.steps:
            if step.ok:
                typer.secho(msg.GIT_STEP_OK.format(step.name), fg=typer.colors.GREEN)
            else:
                typer.secho(
                    msg.GIT_STEP_FAILED.format(step.name, step.returncode), fg=typer.colors.RED
                )
        if report.aborted:
            typer.secho(msg.GIT_ABORTED.format(report.steps[-1].name), fg=typer.colors.RED)

        if not report.ok:
            typer.secho(f"✘ {msg.GIT_PUSH_INCOMPLETE.format(report.directory)}", fg=typer.colors.RED)
            raise typer.Exit(code=EXIT_FAILURE)
        typer.secho(f"✔ {msg.GIT_PUSH_DONE.format(report.directory)}", fg=typer.colors.GREEN)

    return {
        "run": run,
        "open_folder": open_folder,
        "open_file": open_file,
        "git_push": git_push,
    }
