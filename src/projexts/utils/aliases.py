import typer


ALIAS_MAP = {
    "add": ["a"],
    "remove": ["rm"],
    "list_shortcuts": ["ls"],
    "update": ["up"],
    "run": ["r"],
    "open_folder": ["of"],
    "open_file": ["ofi"],
    "git_push": ["gp"],
}


def register_command_aliases(app: typer.Typer, commands: dict) -> None:
    """Register hidden short names for the shortcut and launch commands.

    ``commands`` is the merged result of every ``register(app)`` call in
    ``projexts.cli``, keyed by the Python function name of each command.
    """
    for func_name, aliases in ALIAS_MAP.items():
        if func_name not in commands:
            continue
        for alias in aliases:
            app.command(name=alias, hidden=True)(commands[func_name])
