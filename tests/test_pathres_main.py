from __future__ import annotations

import os
import re
from pathlib import Path

from pathres_cli.cli import main
from pathres_cli.cli_shared import USAGE_MESSAGE


_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def _plain(s: str) -> str:
    return _ANSI_RE.sub("", s)


def test_no_args_prints_notice_and_usage_and_succeeds(capsys) -> None:
    rc = main([])
    captured = capsys.readouterr()

    assert rc == 0
    assert "no args are presented" in captured.err
    assert USAGE_MESSAGE in captured.out
    assert "-f <path>" in captured.out


def test_bad_first_arg_lists_allowed_options(capsys) -> None:
    rc = main(["badcmd"])
    err = _plain(capsys.readouterr().err)

    assert rc == 2
    assert "invalid positional arg1" in err
    assert "r" in err.split("Allowed options are: ", 1)[1]
    assert "info" in err


def test_flag_in_first_position_is_rejected(capsys) -> None:
    rc = main(["-f", "/tmp"])
    assert rc == 2
    assert "Allowed options are" in _plain(capsys.readouterr().err)


def test_info_exits_zero(capsys) -> None:
    rc = main(["info"])
    out = capsys.readouterr().out

    assert rc == 0
    assert out.startswith("Info: ")
    assert out.splitlines()[0] != "Info: "


def test_r_resolves_relative_path(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    rc = main(["r", "-f", "./a//b"])
    out = capsys.readouterr().out

    assert rc == 0
    assert "Relative path: ./a//b" in out
    assert f"Absolute path: {os.path.join(os.getcwd(), 'a', 'b')}" in out


def test_r_tilde_user_joins_under_home(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    rc = main(["r", "-f", "~otheruser"])
    out = capsys.readouterr().out

    assert rc == 0
    assert f"Absolute path: {os.path.join(str(tmp_path), 'otheruser')}" in out


def test_r_empty_path_returns_invalid_argument(capsys) -> None:
    rc = main(["r", "-f", ""])
    captured = capsys.readouterr()

    assert rc == 2
    assert "path cannot be empty" in _plain(captured.err)
    assert captured.out == ""


def test_r_missing_flag_prints_usage(capsys) -> None:
    rc = main(["r"])
    err = _plain(capsys.readouterr().err)

    assert rc == 2
    assert "error:" in err
    assert "-f" in err
    assert "Usage: pathres r" in err
    assert USAGE_MESSAGE in err


def test_r_unknown_flag_is_usage_error(capsys) -> None:
    rc = main(["r", "-f", "x", "--nope"])
    assert rc == 2
    assert "--nope" in _plain(capsys.readouterr().err)


def test_subcommand_help_exits_zero(capsys) -> None:
    rc = main(["r", "--help"])
    out = capsys.readouterr().out

    assert rc == 0
    assert "--file" in _plain(out)


def test_unexpected_error_maps_to_generic_failure(monkeypatch, capsys) -> None:
    def _boom(_path: str):
        raise OSError("disk on fire")

    monkeypatch.setattr("pathres_cli.cli.resolve_path", _boom)
    rc = main(["r", "-f", "x"])

    assert rc == 1
    assert "disk on fire" in _plain(capsys.readouterr().err)


def test_r_empty_home_exits_io_error(monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", "")
    rc = main(["r", "-f", "~/docs"])
    captured = capsys.readouterr()

    assert rc == 5
    assert "failed to get home directory" in _plain(captured.err)
    assert captured.out == ""


def test_info_ignores_trailing_arguments(capsys) -> None:
    rc = main(["info", "extra", "--bogus"])
    out = capsys.readouterr().out

    assert rc == 0
    assert out.startswith("Info: ")


def test_r_ignores_arguments_after_first_positional(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    rc = main(["r", "-f", "x", "extra", "--nope"])
    out = capsys.readouterr().out

    assert rc == 0
    assert f"Absolute path: {os.path.join(os.getcwd(), 'x')}" in out


def test_r_flag_after_positional_is_not_parsed(capsys) -> None:
    rc = main(["r", "extra", "-f", "x"])
    err = _plain(capsys.readouterr().err)

    assert rc == 2
    assert USAGE_MESSAGE in err
