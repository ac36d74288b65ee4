from __future__ import annotations

import sys

import typer

from . import DESCRIPTION, __commit__, __version__
from .cli_shared import (
    PROG_NAME,
    USAGE_MESSAGE,
    CliException,
    CliUsageError,
    InfoOpts,
    ResolveOpts,
    _eprint,
    _print_json,
    _render_usage_error_with_help,
    _rich_error,
)
from .resolver import resolve_path
from .status import ExitStatus
from .validation import validate_first_arg


app = typer.Typer(
    name=PROG_NAME,
    help="Resolve relative or ~-prefixed paths into absolute paths.",
    no_args_is_help=True,
    add_completion=False,
)


def _cmd_resolve(opts: ResolveOpts) -> int:
    res = resolve_path(opts.path)
    if not res.ok:
        _rich_error(res.error.message)
        return int(res.error.status)
    if opts.json_output:
        _print_json(
            {
                "kind": "pathres.resolve.v1",
                "relativePath": opts.path,
                "absolutePath": res.path,
            }
        )
        return int(ExitStatus.SUCCESS)
    typer.echo(f"Relative path: {opts.path}")
    typer.echo(f"Absolute path: {res.path}")
    return int(ExitStatus.SUCCESS)


def _cmd_info(opts: InfoOpts) -> int:
    if opts.json_output:
        _print_json(
            {
                "kind": "pathres.info.v1",
                "description": DESCRIPTION,
                "version": __version__,
                "commit": __commit__,
            }
        )
        return int(ExitStatus.SUCCESS)
    typer.echo(f"Info: {DESCRIPTION}\nVersion: {__version__}\nCommit: {__commit__}")
    return int(ExitStatus.SUCCESS)


def _exit_on_failure(code: int) -> None:
    if code:
        raise typer.Exit(code=code)


@app.command(
    "r",
    help="Resolve the path given with -f into a clean absolute path.",
    # Parsing stops at the first positional; it and everything after it is ignored.
    context_settings={"allow_extra_args": True, "allow_interspersed_args": False},
)
def resolve(
    file: str = typer.Option(
        ...,
        "-f",
        "--file",
        help="Relative or absolute path; a leading ~ expands to the home directory",
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    _exit_on_failure(_cmd_resolve(ResolveOpts(path=file, json_output=json_output)))


@app.command(
    "info",
    help="Print description, version and commit hash.",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def info(
    json_output: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    _exit_on_failure(_cmd_info(InfoOpts(json_output=json_output)))


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        _eprint("no args are presented")
        typer.echo(USAGE_MESSAGE)
        return int(ExitStatus.SUCCESS)

    err = validate_first_arg(argv[0])
    if err is not None:
        _rich_error(err.message)
        return int(err.status)

    try:
        result = app(args=argv, prog_name=PROG_NAME, standalone_mode=False)
        if result is None:
            return int(ExitStatus.SUCCESS)
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except CliUsageError as e:
        _render_usage_error_with_help(message=e.format_message(), ctx=e.ctx)
        return int(ExitStatus.INVALID_ARGUMENT)
    except CliException as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except typer.Abort:
        _rich_error("aborted")
        return int(ExitStatus.FAILURE)
    except Exception as e:
        _rich_error(str(e))
        return int(ExitStatus.FAILURE)


if __name__ == "__main__":
    raise SystemExit(main())
