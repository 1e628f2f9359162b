from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class PackError(Exception):
    pass


class UsageError(PackError):
    pass


class OpError(PackError):
    pass


class UnknownCommandError(UsageError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command = command


class MissingTemplateError(OpError):
    pass


class FilesystemError(OpError):
    pass


PROG_NAME = "ai-friendly-pack"
TEMPLATE_DIRNAME = "template"


_ERROR_CONSOLE = Console(stderr=True)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]Error:[/bold red] {escape(msg)}", soft_wrap=True)
