"""Path normalization for stored commands."""

import logging
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from projexts.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def normalize_token(token: str, base_dir: Optional[Path] = None) -> str:
    """Rewrite a relative path token to its absolute form when it exists.

    Absolute tokens are returned verbatim, whether or not they exist. Tokens
    that do not name an existing entry (bare executables, flags, missing
    paths) are returned unchanged.
    """
    if not token or os.path.isabs(token):
        return token

    base = base_dir if base_dir is not None else Path.cwd()
    candidate = base / token
    if not os.path.exists(candidate):
        return token

    resolved = str(candidate.resolve())
    logger.debug("Resolved '%s' to '%s'", token, resolved)
    return resolved


def normalize_command(
    command: Sequence[str],
    base_dir: Optional[Union[str, Path]] = None,
    require_path: bool = False,
) -> list[str]:
    """Normalize every token of a command, never dropping any.

    Raises:
        ValidationError: if the command is empty, or if ``require_path`` is set
            and no token names an existing filesystem entry.
    """
    if not command:
        raise ValidationError("command is empty")

    base = Path(base_dir) if base_dir is not None else Path.cwd()
    normalized = [normalize_token(token, base) for token in command]

    if require_path and not any(token and os.path.exists(token) for token in normalized):
        raise ValidationError("no valid path in command")

    return normalized


def resolve_directory(token: str) -> Path:
    """Return the token itself when it is a directory, otherwise its parent."""
    path = Path(token)
    if os.path.isdir(token):
        return path

    parent = path.parent
    # Path("npm").parent is Path("."): the token carries no directory part
    if parent == path or (not path.is_absolute() and parent == Path(".")):
        raise NotFoundError(f"'{token}' has no directory component")
    return parent
