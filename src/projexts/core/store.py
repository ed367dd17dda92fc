"""Durable, ordered storage of shortcuts in a JSON file."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from projexts.config import DUPLICATE_POLICIES, Config
from projexts.core.paths import normalize_command
from projexts.dtos.shortcut import Shortcut
from projexts.errors import DuplicateShortcutError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


class ShortcutStore:
    """CRUD over the shortcut collection backed by a single JSON file.

    Every operation reads the file fresh; every mutation is a full
    load, modify, save cycle. There is no locking between processes.
    """

    def __init__(
        self,
        path: Union[str, Path],
        duplicates: str = "allow",
        require_path: bool = False,
    ):
        if duplicates not in DUPLICATE_POLICIES:
            raise ValidationError(f"Unknown duplicates policy '{duplicates}'")
        self.path = Path(path)
        self.duplicates = duplicates
        self.require_path = require_path

    @classmethod
    def from_config(cls, config: Config) -> "ShortcutStore":
        return cls(
            path=config.store.resolved_path,
            duplicates=config.store.duplicates,
            require_path=config.paths.require_existing,
        )

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> List[Shortcut]:
        """Read the collection, creating an empty store file if missing."""
        try:
            if not self.path.exists():
                logger.info("Creating storage for shortcuts at %s", self.path)
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text("[]", encoding="utf-8")
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read shortcut store {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise StorageError(f"Shortcut store {self.path} is not valid UTF-8: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Shortcut store {self.path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise StorageError(f"Shortcut store {self.path} must contain a JSON array")

        return [Shortcut.from_dict(entry) for entry in data]

    def save(self, shortcuts: Sequence[Shortcut]) -> None:
        """Overwrite the store file with the whole collection."""
        payload = json.dumps([s.to_dict() for s in shortcuts], indent=2)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write shortcut store {self.path}: {e}") from e

        logger.debug("Saved %d shortcut(s) to %s", len(shortcuts), self.path)

    def add(self, name: str, command: Sequence[str]) -> Shortcut:
        """Validate and normalize a command, then append it under ``name``."""
        if not name:
            raise ValidationError("shortcut name is empty")
        normalized = normalize_command(command, require_path=self.require_path)

        shortcuts = self.load()
        matches = [s for s in shortcuts if s.name == name]

        if matches and self.duplicates == "reject":
            raise DuplicateShortcutError(f"Shortcut '{name}' already exists")

        if matches and self.duplicates == "overwrite":
            first = matches[0]
            first.command = normalized
            shortcuts = [s for s in shortcuts if s.name != name or s is first]
            self.save(shortcuts)
            return first

        shortcut = Shortcut(name=name, command=normalized)
        shortcuts.append(shortcut)
        self.save(shortcuts)
        return shortcut

    def remove(self, name: str) -> int:
        """Remove every shortcut called ``name``; return how many were removed."""
        shortcuts = self.load()
        kept = [s for s in shortcuts if s.name != name]
        removed = len(shortcuts) - len(kept)
        if removed:
            self.save(kept)
        return removed

    def list(self) -> List[Shortcut]:
        return self.load()

    def find(self, name: str) -> Optional[Shortcut]:
        """Return the first shortcut called ``name``."""
        for shortcut in self.load():
            if shortcut.name == name:
                return shortcut
        return None

    def get(self, name: str) -> Shortcut:
        shortcut = self.find(name)
        if shortcut is None:
            raise NotFoundError(f"No shortcut found with name '{name}'")
        return shortcut

    def update(self, name: str, new_command: Optional[Sequence[str]]) -> Shortcut:
        """Replace the command of the first shortcut called ``name``.

        A ``None`` command leaves the shortcut as it is but still saves.
        """
        normalized = None
        if new_command is not None:
            normalized = normalize_command(new_command, require_path=self.require_path)

        shortcuts = self.load()
        target = next((s for s in shortcuts if s.name == name), None)
        if target is None:
            raise NotFoundError(f"No shortcut found with name '{name}'")

        if normalized is not None:
            target.command = normalized
        self.save(shortcuts)
        return target

    def reset(self) -> bool:
        """Delete the store file. Returns False if it was already gone."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(f"Cannot delete shortcut store {self.path}: {e}") from e
        logger.debug("Deleted shortcut store %s", self.path)
        return True
