from __future__ import annotations

from .status import ExitStatus, StatusError


ALLOWED_FIRST_ARGS: frozenset[str] = frozenset({"r", "info"})


def allowed_options_text(allowed: frozenset[str] = ALLOWED_FIRST_ARGS) -> str:
    return ", ".join(sorted(allowed))


def validate_first_arg(arg: str) -> StatusError | None:
    if arg in ALLOWED_FIRST_ARGS:
        return None
    return StatusError(
        status=ExitStatus.INVALID_ARGUMENT,
        message=f"invalid positional arg1. Allowed options are: {allowed_options_text()}",
    )
