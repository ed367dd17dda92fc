"""Exceptions raised by the projexts core."""


class ProjextsError(Exception):
    """Base class for every error the core reports to the CLI."""


class StorageError(ProjextsError):
    """The shortcut store could not be read, decoded, written or deleted."""


class ValidationError(ProjextsError):
    """A shortcut name or command was rejected."""


class DuplicateShortcutError(ValidationError):
    """A shortcut with the same name already exists and duplicates are rejected."""


class NotFoundError(ProjextsError):
    """No shortcut matched a name, or a path has no directory component."""


class UnsupportedPlatformError(ProjextsError):
    """The current operating system has no known file opener."""


class ExecutionError(ProjextsError):
    """A program could not be spawned or waited for."""
