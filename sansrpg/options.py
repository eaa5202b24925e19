"""Reading and checking the ``options.txt`` settings file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

OPTIONS_FILE = "options.txt"
VOLUME_KEY = "volume="
READ_LIMIT = 200

_SEPARATORS = re.compile(r"[\x00-\x0a]+")

SYNTAX_REPORT = "\033[33mSyntax error in file : \033[1moptions.txt\n\033[0m"
MISSING_REPORT = (
    "\033[31mERROR :\033[33m Impossible to find file : "
    "\033[1moptions.txt\n\033[0m"
)


class OptionsError(Exception):
    """The options file is unusable.

    ``report`` is the text shown to the user, empty when nothing is shown.
    """

    def __init__(self, message: str, report: str = "") -> None:
        super().__init__(message)
        self.report = report


class MissingOptionsFile(OptionsError):
    """The options file cannot be opened."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"cannot open options file: {path}", MISSING_REPORT)
        self.path = path


def split_words(text: str) -> list[str]:
    """Split text into words separated by control characters below code 11.

    Spaces are part of words; the text ends at the first NUL character.
    """
    text = text.split("\0", 1)[0]
    return [word for word in _SEPARATORS.split(text) if word]


def parse_number(text: str) -> int:
    """Read a number digit by digit without any validation of the digits."""
    total = 0
    for char in text:
        total = (total + ord(char) - 48) * 10
    return total // 10


def format_number(value: int) -> str:
    """Format a non-negative number; negative numbers give an empty string."""
    if value == 0:
        return "0"
    if value < 0:
        return ""
    return str(value)


def find_line(lines: Sequence[str], key: str) -> int | None:
    """Index of the first line starting with ``key``, or None."""
    return next(
        (index for index, line in enumerate(lines) if line.startswith(key)),
        None,
    )


def option_value(lines: Sequence[str], key: str) -> int:
    """Number written after the first '=' of the line for ``key``.

    When no line matches, the first line is used.
    """
    if not lines:
        raise OptionsError("options file is empty", SYNTAX_REPORT)
    index = find_line(lines, key)
    line = lines[0 if index is None else index]
    _, separator, value = line.partition("=")
    return parse_number(value) if separator else 0


def check_params(lines: Sequence[str], key: str) -> int:
    """Return the value for ``key``, raising if it is outside 0..100."""
    value = option_value(lines, key)
    if not 0 <= value <= 100:
        raise OptionsError(f"{key} value {value} is outside 0..100")
    return value


def read_options(path: str | Path = OPTIONS_FILE) -> list[str]:
    """Read the first bytes of the options file as a list of words."""
    try:
        with open(path, "rb") as handle:
            content = handle.read(READ_LIMIT)
    except OSError:
        raise MissingOptionsFile(path) from None
    return split_words(content.decode("latin-1"))


def validate_options(path: str | Path = OPTIONS_FILE) -> int:
    """Check the options file and return the configured volume."""
    lines = read_options(path)
    if find_line(lines, VOLUME_KEY) is None:
        raise OptionsError(f"no {VOLUME_KEY!r} entry in {path}", SYNTAX_REPORT)
    return check_params(lines, VOLUME_KEY)


def load_volume(path: str | Path = OPTIONS_FILE) -> int:
    """Volume stored in the options file, without range checking."""
    return option_value(read_options(path), VOLUME_KEY)