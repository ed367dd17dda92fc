"""Turn stored shortcuts into processes."""

import logging
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from projexts.config import GitConfig
from projexts.core.paths import resolve_directory
from projexts.dtos.shortcut import Shortcut
from projexts.errors import ExecutionError, UnsupportedPlatformError

logger = logging.getLogger(__name__)

OPENERS = {
    "Windows": "explorer",
    "Darwin": "open",
    "Linux": "xdg-open",
    "FreeBSD": "xdg-open",
    "OpenBSD": "xdg-open",
    "NetBSD": "xdg-open",
}


def get_opener(system: Optional[str] = None) -> str:
    """Return the program that opens files and folders on this platform."""
    system = system or platform.system()
    opener = OPENERS.get(system)
    if opener is None:
        raise UnsupportedPlatformError(f"No file opener known for platform '{system}'")
    return opener


def spawn(argv: Sequence[str], cwd: Optional[Path] = None) -> int:
    """Run a program with inherited stdio, wait for it and return its exit code."""
    if not argv:
        raise ExecutionError("command is empty")

    logger.debug("Spawning %s (cwd=%s)", list(argv), cwd)
    try:
        completed = subprocess.run(list(argv), cwd=cwd)
    except FileNotFoundError as e:
        raise ExecutionError(f"Program not found: {argv[0]}") from e
    except OSError as e:
        raise ExecutionError(f"Failed to run {argv[0]}: {e}") from e
    return completed.returncode


@dataclass
class OpenFileReport:
    opened: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


@dataclass
class StepResult:
    name: str
    args: List[str]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class GitPushReport:
    directory: Path
    steps: List[StepResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def ok(self) -> bool:
        return not self.aborted and all(step.ok for step in self.steps)


class CommandResolver:
    """Run, open or push the command stored in a shortcut.

    ``runner`` spawns a program and returns its exit code; it defaults to
    :func:`spawn` and is replaced in tests.
    """

    def __init__(
        self,
        system: Optional[str] = None,
        git_config: Optional[GitConfig] = None,
        runner: Callable[..., int] = spawn,
    ):
        self.system = system
        self.git_config = git_config or GitConfig()
        self.runner = runner

    def build_argv(self, shortcut: Shortcut, extra_args: Sequence[str] = ()) -> List[str]:
        if not shortcut.command:
            raise ExecutionError(f"Command for '{shortcut.name}' is empty.")
        return [shortcut.program, *shortcut.args, *extra_args]

    def run(self, shortcut: Shortcut, extra_args: Sequence[str] = ()) -> int:
        """Run the stored command followed by ``extra_args``.

        The child's exit code is returned as-is; a non-zero code is not an
        error here.
        """
        return self.runner(self.build_argv(shortcut, extra_args))

    def _first_token(self, shortcut: Shortcut) -> str:
        if not shortcut.command:
            raise ExecutionError(f"Command for '{shortcut.name}' is empty.")
        return shortcut.program

    def folder_of(self, shortcut: Shortcut) -> Path:
        return resolve_directory(self._first_token(shortcut))

    def open_folder(self, shortcut: Shortcut) -> Path:
        directory = self.folder_of(shortcut)
        opener = get_opener(self.system)
        self.runner([opener, str(directory)])
        return directory

    def open_file(self, shortcut: Shortcut) -> OpenFileReport:
        """Open every token of the command that is an existing regular file."""
        report = OpenFileReport()
        opener = None
        for token in shortcut.command:
            if not os.path.isfile(token):
                logger.debug("Skipping '%s': not an existing file", token)
                report.skipped.append(token)
                continue
            if opener is None:
                opener = get_opener(self.system)
            self.runner([opener, token])
            report.opened.append(token)
        return report

    def git_steps(self, message: str) -> List[StepResult]:
        git = self.git_config
        push_args = ["git", "push"]
        if git.remote:
            push_args.append(git.remote)
            if git.branch:
                push_args.append(git.branch)

        return [
            StepResult("add", ["git", "add", *git.add_args], -1),
            StepResult("commit", ["git", "commit", "-m", message], -1),
            StepResult("push", push_args, -1),
        ]

    def git_push(self, shortcut: Shortcut, message: str) -> GitPushReport:
        """Stage, commit and push inside the shortcut's directory.

        Each step runs with the directory as its own working directory; the
        current process never changes directory.
        """
        directory = self.folder_of(shortcut)
        report = GitPushReport(directory=directory)

        steps = self.git_steps(message)
        for position, step in enumerate(steps, 1):
            step.returncode = self.runner(step.args, cwd=directory)
            report.steps.append(step)
            if step.ok:
                continue
            logger.debug("git %s exited with code %d", step.name, step.returncode)
            if self.git_config.abort_on_failure and position < len(steps):
                report.aborted = True
                break

        return report
