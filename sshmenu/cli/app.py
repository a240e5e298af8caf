"""Command-line interface for the sshmenu launcher."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

import typer

from sshmenu import __version__
from sshmenu.cli.navigator import MenuNavigator
from sshmenu.cli.updater import UpdateError, self_update
from sshmenu.config import ConfigError
from sshmenu.paths import resolve_config_path

CLEAR_SCREEN = "\x1b[2J\x1b[H"
_FLAG_ARGS = frozenset({"--help", "--version", "-V", "--update"})

app = typer.Typer(add_completion=False)


@app.command(
    help=(
        f"SSHMenu - Interactive SSH launcher (version {__version__}).\n\n"
        "Without SEARCH, pick a project and then a server. With SEARCH, pick "
        "from every server whose name or description contains it."
    ),
)
def cli(
    search: Optional[list[str]] = typer.Argument(
        None,
        metavar="SEARCH",
        help="Words to filter servers by; joined with spaces.",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the application's version and exit.",
        is_eager=True,
    ),
    update: bool = typer.Option(
        False,
        "--update",
        help="Replace this binary with the latest release.",
    ),
) -> None:
    """Handle the special flags, then run the menu."""
    if version:
        typer.echo(__version__)
        raise typer.Exit()

    if update:
        try:
            exit_code = self_update()
        except UpdateError as exc:
            typer.echo(str(exc))
            raise typer.Exit(exc.exit_code) from exc
        raise typer.Exit(exit_code)

    raise typer.Exit(_run_menu(" ".join(search or [])))


def _run_menu(search: str) -> int:
    """Clear the screen and hand control to the menu navigator."""

    typer.echo(CLEAR_SCREEN, nl=False, color=True)
    config_path = resolve_config_path()
    try:
        return MenuNavigator(config_path).run(search)
    except ConfigError as exc:
        typer.echo(f"Error loading config: {exc}")
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the sshmenu CLI.

    Only a leading flag is parsed as an option; any other invocation treats
    every word, dashes included, as search text.
    """

    args = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        if args and args[0] not in _FLAG_ARGS:
            return _run_menu(" ".join(args))
        result = app(args=args, standalone_mode=False)
    except typer.Exit as exc:  # exit path already handled by Typer
        return exc.exit_code
    except (typer.Abort, KeyboardInterrupt):
        typer.echo("Exiting.")
        return 0
    except Exception as exc:  # unexpected errors are reported, not raised
        typer.echo(str(exc), err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover - manual execution only
    raise SystemExit(main())
