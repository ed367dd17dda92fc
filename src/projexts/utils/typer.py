from typing import Iterable

import typer


def add_typer_block_message(
    header: str,
    subheader: str,
    messages: Iterable[str],
    indent_block: bool = True,
    use_separator: bool = True,
) -> None:
    """Print a titled block of lines."""
    typer.secho(f"\n{header}", fg=typer.colors.CYAN, bold=True)
    if use_separator:
        typer.secho("=" * 50, fg=typer.colors.CYAN)
    if subheader:
        typer.secho(subheader, fg=typer.colors.WHITE)

    prefix = "  " if indent_block else ""
    for message in messages:
        typer.echo(f"{prefix}{message}")
    typer.echo("")
