"""User name validation, per-user log headers and the user log file."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from pathlib import Path
from typing import IO

LOG_RULE = "------------------------------------------------------\n"
LOG_FOOTER = "\n" + LOG_RULE


def is_valid_name(name: str) -> bool:
    """Return True when the name is non-empty and holds only ASCII letters and spaces."""
    return bool(name) and all(
        "A" <= ch <= "Z" or "a" <= ch <= "z" or ch == " " for ch in name
    )


@dataclass(frozen=True)
class NameValidation:
    """Which of the three name fields passed validation."""

    first: bool
    middle: bool
    last: bool

    @property
    def all_valid(self) -> bool:
        """True when registration may go ahead."""
        return self.first and self.middle and self.last


def validate_names(first: str, middle: str, last: str) -> NameValidation:
    """Validate a first, middle and last name together."""
    return NameValidation(
        first=is_valid_name(first),
        middle=is_valid_name(middle),
        last=is_valid_name(last),
    )


@dataclass(frozen=True)
class LogHeader:
    """The file name and opening lines of a user's log."""

    file_name: str
    name_line: str
    date_line: str

    @property
    def lines(self) -> tuple[str, str, str]:
        """The entries written at the top of a fresh log, in order."""
        return self.name_line, self.date_line, LOG_RULE


def generate_log_header(
    first: str, middle: str, last: str, today: _dt.date | None = None
) -> LogHeader:
    """Build the log file name and header lines for a user on a given day."""
    day = today if today is not None else _dt.date.today()
    stamp = f"{day.day:02d}_{day.month:02d}_{day.year}"
    return LogHeader(
        file_name=f"{first}_{last}_userlogs_{stamp}.txt",
        name_line=f"Name : {first} {middle} {last}\n",
        date_line=f"Date : {stamp}\n",
    )


class UserLog:
    """A text log of a user's actions, closed with a ruled footer."""

    def __init__(self) -> None:
        self._file: IO[str] | None = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self, path: str | Path) -> None:
        """Create (or truncate) the log file at path; raises OSError on failure."""
        handle = open(path, "w", encoding="utf-8")
        if self._file is not None:
            self._file.close()
        self._file = handle

    def add_entry(self, text: str) -> None:
        """Append text to the log verbatim."""
        if self._file is None:
            raise RuntimeError("the log file is not open")
        self._file.write(text)

    def close(self) -> None:
        """Write the footer and close the log; does nothing when it is not open."""
        if self._file is None:
            return
        try:
            self._file.write(LOG_FOOTER)
        finally:
            self._file.close()
            self._file = None

    def __enter__(self) -> UserLog:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()