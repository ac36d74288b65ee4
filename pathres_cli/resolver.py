"""Turn a raw path argument into a clean absolute path.

Only the home and working directory lookups touch the platform; the target
path itself is never stat'ed, opened or required to exist.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .status import ExitStatus, StatusError


@dataclass(frozen=True)
class PathResolution:
    raw: str
    path: str = ""
    error: StatusError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


_HOME_ENV = "USERPROFILE" if os.name == "nt" else "HOME"


def user_home_dir() -> str:
    home = os.environ.get(_HOME_ENV, "")
    if not home:
        raise RuntimeError(f"${_HOME_ENV} is not defined")
    return home


def _clean(path: str) -> str:
    out = os.path.normpath(path)
    if os.sep == "/" and out.startswith("//"):
        out = "/" + out.lstrip("/")
    return out


def expand_tilde(path: str, *, home: str) -> str:
    """Replace a leading ``~`` with ``home``.

    ``~name`` is joined literally under ``home``; it does not look up the
    account ``name``.
    """
    if not path.startswith("~"):
        return path
    if path == "~":
        return home
    if path == "~/":
        return home + os.sep
    if path.startswith("~/"):
        return home + os.sep + path[2:]
    return home + os.sep + path[1:]


def resolve_path(path: str) -> PathResolution:
    if path == "":
        return PathResolution(
            raw=path,
            error=StatusError(status=ExitStatus.INVALID_ARGUMENT, message="path cannot be empty"),
        )

    expanded = path
    if path.startswith("~"):
        try:
            home = user_home_dir()
        except RuntimeError as e:
            return PathResolution(
                raw=path,
                error=StatusError(
                    status=ExitStatus.IO_ERROR,
                    message=f"failed to get home directory: {e}",
                ),
            )
        expanded = expand_tilde(path, home=home)

    try:
        absolute = os.path.abspath(expanded)
    except OSError as e:
        return PathResolution(
            raw=path,
            error=StatusError(
                status=ExitStatus.INVALID_ARGUMENT,
                message=f"failed to resolve absolute path: {e}",
            ),
        )

    return PathResolution(raw=path, path=_clean(absolute))
