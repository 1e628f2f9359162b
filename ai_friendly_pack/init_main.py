from __future__ import annotations

import sys
from pathlib import Path

import click
import typer

from . import __version__
from .cli_shared import (
    PROG_NAME,
    OpError,
    PackError,
    UnknownCommandError,
    _rich_error,
)
from .initializer import copy_template, require_template_dir, template_root

INIT_COMMAND = "init"

_EPILOG = "\n\n".join(
    [
        "Commands:",
        f"  {INIT_COMMAND}        Initialize AI-friendly project structure (default)",
        "  --help, -h  Show this help message",
        "Examples:",
        f"  {PROG_NAME} {INIT_COMMAND}",
        f"  {PROG_NAME}",
    ]
)

# typer may raise from its own bundled click rather than the installed one
_CLICK_ERRORS: tuple[type[Exception], ...] = tuple(
    {
        click.ClickException,
        next(c for c in typer.BadParameter.__mro__ if c.__name__ == "ClickException"),
    }
)

app = typer.Typer(name=PROG_NAME, add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit(code=0)


def _say(message: str, *, quiet: bool) -> None:
    if not quiet:
        typer.echo(message)


def cmd_init(*, target_dir: Path, quiet: bool) -> None:
    _say("Initializing AI-friendly project structure...", quiet=quiet)

    template_dir = require_template_dir(template_root())
    _say(f"Copying template from: {template_dir}", quiet=quiet)
    _say(f"To: {target_dir}", quiet=quiet)

    copy_template(
        template_dir,
        target_dir,
        on_copy=lambda path: _say(f"Copied: {path.name}", quiet=quiet),
    )

    _say("\nAI-friendly project structure initialized successfully!", quiet=quiet)


def _dispatch(command: str, *, quiet: bool) -> None:
    if command != INIT_COMMAND:
        raise UnknownCommandError(command)
    cmd_init(target_dir=Path.cwd(), quiet=quiet)


@app.command(
    help="Initialize an AI-friendly project structure in the current directory.",
    epilog=_EPILOG,
    # only the first token is dispatched; unrecognized options and trailing
    # tokens are accepted instead of raising usage errors
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
def run(
    command: str = typer.Argument(
        INIT_COMMAND,
        help=f"Command to run ({INIT_COMMAND} is the only one)",
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Suppress progress output"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    try:
        _dispatch(command, quiet=quiet)
    except UnknownCommandError as e:
        _rich_error(str(e))
        typer.echo(f'Run "{PROG_NAME} --help" for usage information.')
        raise typer.Exit(code=1)
    except OpError as e:
        _rich_error(str(e))
        raise typer.Exit(code=1)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        result = app(args=argv, prog_name=PROG_NAME, standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except _CLICK_ERRORS as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except PackError as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
