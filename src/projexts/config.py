"""Configuration management for projexts."""

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml

from projexts.errors import ValidationError

STORE_ENV_VAR = "PROJEXTS_STORE"

DUPLICATE_POLICIES = ("allow", "reject", "overwrite")


@dataclass
class StoreConfig:
    """Shortcut store configuration."""

    path: str = "~/.projexts_config.json"
    duplicates: str = "allow"

    @property
    def resolved_path(self) -> Path:
        return Path(os.path.expandvars(self.path)).expanduser()


@dataclass
class PathsConfig:
    """Command path normalization configuration."""

    require_existing: bool = False


@dataclass
class GitConfig:
    """Git push composite configuration."""

    abort_on_failure: bool = True
    add_args: list = field(default_factory=lambda: ["-A"])
    remote: str = ""
    branch: str = ""


@dataclass
class Config:
    """Main configuration container."""

    store: StoreConfig = field(default_factory=StoreConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    git: GitConfig = field(default_factory=GitConfig)


DEFAULT_CONFIG = {
    "store": {
        "path": "~/.projexts_config.json",
        "duplicates": "allow",
    },
    "paths": {
        "require_existing": False,
    },
    "git": {
        "abort_on_failure": True,
        "add_args": ["-A"],
        "remote": "",
        "branch": "",
    },
}

CONFIG_NAMES = [".projexts.toml", "projexts.toml"]


def find_config_file() -> Optional[Path]:
    """Search for config file in current directory, its parents, then home."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        for name in CONFIG_NAMES:
            config_path = parent / name
            if config_path.exists():
                return config_path

    home_config = Path.home() / ".projexts.toml"
    if home_config.exists():
        return home_config

    return None


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from TOML file or use defaults."""

    path: Optional[Path]
    if config_path:
        path = Path(config_path)
    else:
        path = find_config_file()

    config_data: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
    if path is not None and path.exists():
        try:
            user_config = toml.load(path)
        except (OSError, toml.TomlDecodeError) as e:
            print(f"Warning: Error loading config file: {e}")
        else:
            # Deep merge, unknown sections and keys are ignored
            for section, values in user_config.items():
                if section not in config_data or not isinstance(values, dict):
                    continue
                known = config_data[section]
                known.update({key: value for key, value in values.items() if key in known})

    store_path = os.getenv(STORE_ENV_VAR)
    if store_path:
        config_data["store"]["path"] = store_path

    duplicates = config_data["store"]["duplicates"]
    if duplicates not in DUPLICATE_POLICIES:
        raise ValidationError(
            f"Invalid duplicates policy '{duplicates}'. "
            f"Expected one of: {', '.join(DUPLICATE_POLICIES)}"
        )

    add_args = config_data["git"]["add_args"]
    if not isinstance(add_args, list) or not all(isinstance(arg, str) for arg in add_args):
        raise ValidationError(
            f"Invalid git add_args {add_args!r}. Expected a list of strings, e.g. [\"-A\"]"
        )

    return Config(
        store=StoreConfig(**config_data["store"]),
        paths=PathsConfig(**config_data["paths"]),
        git=GitConfig(**config_data["git"]),
    )
