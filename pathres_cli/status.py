"""Exit statuses and the error value carried between resolver and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ExitStatus(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    INVALID_ARGUMENT = 2
    IO_ERROR = 5
    # Reserved; nothing produces it yet.
    PERMISSION_DENIED = 13


@dataclass(frozen=True)
class StatusError:
    """A failure paired with the process exit status it maps to."""

    status: ExitStatus
    message: str

    def __str__(self) -> str:
        return self.message
