import functools
from typing import Any, Callable

import typer

from projexts.errors import NotFoundError, ProjextsError

EXIT_FAILURE = 1
EXIT_NOT_FOUND = 3


def report_errors() -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Turn core errors into a coloured message and a distinct exit code.

    Not found conditions are recoverable and exit with ``EXIT_NOT_FOUND`` so
    callers can tell "did nothing" apart from success and from failure.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except NotFoundError as e:
                typer.secho(f"✘ {e}", fg=typer.colors.YELLOW)
                raise typer.Exit(code=EXIT_NOT_FOUND)
            except ProjextsError as e:
                typer.secho(f"✘ {e}", fg=typer.colors.RED)
                raise typer.Exit(code=EXIT_FAILURE)

        return wrapper

    return decorator
