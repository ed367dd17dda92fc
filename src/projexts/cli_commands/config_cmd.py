import os
from typing import Any, Callable, Dict

import typer

EXAMPLE_CONFIG = """# projexts configuration file

[store]
path = "{store_path}"
duplicates = "allow"  # allow | reject | overwrite

[paths]
require_existing = false  # If true, add/update need at least one token naming a real path

[git]
abort_on_failure = true  # Stop git-push after the first failing step
add_args = ["-A"]
remote = ""  # Empty pushes to the branch's upstream
branch = ""
"""


def register(app: typer.Typer) -> Dict[str, Callable[..., Any]]:
    @app.command()
    def init_config(
        path: str = typer.Option(".projexts.toml", "--path", "-p", help="Config file path"),
        store_path: str = typer.Option(
            "~/.projexts_config.json", "--store", "-s", help="Shortcut store location"
        ),
    ):
        """Generate example configuration file."""

        if os.path.exists(path):
            overwrite = typer.confirm(f"{path} already exists. Overwrite?")
            if not overwrite:
                typer.echo("Cancelled.")
                raise typer.Exit(code=0)

        with open(path, "w") as f:
            f.write(EXAMPLE_CONFIG.format(store_path=store_path))

        typer.secho(f"✔ Configuration file created: {path}", fg=typer.colors.GREEN)

    return {"init_config": init_config}
