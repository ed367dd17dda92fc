from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Optional

import typer
from typer import Option

from projexts.config import Config, load_config
from projexts.core.resolver import CommandResolver
from projexts.core.store import ShortcutStore
from projexts.errors import ProjextsError
from projexts.messages import shortcut as msg


@dataclass
class ProjextsCtx:
    config: Config
    store: ShortcutStore
    resolver: CommandResolver

    def ensure_store(self) -> None:
        """Create the store file on first use, telling the user about it."""
        if not self.store.exists():
            typer.secho(msg.CREATING_STORAGE, fg=typer.colors.WHITE)
            self.store.load()


def get_config(
    config_file: Annotated[
        Optional[Path], Option("--config", "-c", help="Path to config file")
    ] = None,
) -> Config:
    try:
        return load_config(config_file)
    except ProjextsError as e:
        typer.secho(f"✘ {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


def get_context(
    config_file: Annotated[
        Optional[Path], Option("--config", "-c", help="Path to config file")
    ] = None,
) -> ProjextsCtx:
    config = get_config(config_file)
    return ProjextsCtx(
        config=config,
        store=ShortcutStore.from_config(config),
        resolver=CommandResolver(git_config=config.git),
    )
