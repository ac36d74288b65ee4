from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape


PROG_NAME = "pathres"

USAGE_MESSAGE = f"""Usage of '{PROG_NAME}': {PROG_NAME} [option] [flags]

Application used for get absolute from relative path.

Options (only one required)
    - r: resolve the path given with -f
    - info: info about application

Flags (all required):
    -f <path>: relative or absolute path

Examples:
    {PROG_NAME} r -f /var/lib/rpm/rpmdb.sqlite
    {PROG_NAME} r -f ~/docs
    {PROG_NAME} info"""


# Typer may bundle its own copy of Click, so take the exception bases from the
# classes Typer exports rather than from the `click` package.
def _base_named(cls: type, name: str) -> type:
    for base in cls.__mro__:
        if base.__name__ == name:
            return base
    raise TypeError(f"{cls.__name__} has no base named {name}")


CliUsageError = _base_named(typer.BadParameter, "UsageError")
CliException = _base_named(typer.BadParameter, "ClickException")


@dataclass(frozen=True)
class ResolveOpts:
    path: str
    json_output: bool = False


@dataclass(frozen=True)
class InfoOpts:
    json_output: bool = False


_ERROR_CONSOLE = Console(stderr=True, highlight=False)


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}", soft_wrap=True)


def _render_usage_error_with_help(*, message: str, ctx: Any = None) -> None:
    _rich_error(message)
    usage_line = ""
    get_usage = getattr(ctx, "get_usage", None)
    if callable(get_usage):
        try:
            usage_line = str(get_usage() or "").strip()
        except Exception:
            usage_line = ""
    if usage_line:
        _eprint(usage_line)
    _eprint("")
    _eprint(USAGE_MESSAGE)


def _print_json(obj: Any) -> None:
    sys.stdout.write(json.dumps(obj, separators=(",", ":"), sort_keys=True) + "\n")
