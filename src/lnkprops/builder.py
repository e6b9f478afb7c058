"""Build the PowerShell command that reports shortcut properties."""

import subprocess
from collections.abc import Sequence

from ._constants import (
    OUTPUT_ENCODING_PREAMBLE,
    POWERSHELL_ARGS,
    POWERSHELL_EXE,
    PROPERTY_NAMES,
    SINGLE_QUOTES,
)

_PROPERTY_LIST = ",".join(PROPERTY_NAMES)


def escape_path(path: str) -> str:
    """Double every single-quote character in *path*.

    PowerShell closes a single-quoted literal on ``'`` and on the
    typographic quotes U+2018..U+201B; a doubled quote is a literal quote.
    """
    for quote in SINGLE_QUOTES:
        path = path.replace(quote, quote * 2)
    return path


def build_fragment(path: str) -> str:
    """Return the PowerShell statement that lists every property of *path*.

    Select-Object adds the properties a WshURLShortcut lacks as empty
    values, so every block carries all labels and the same value column.
    """
    return (
        "(New-Object -COM WScript.Shell).CreateShortcut('"
        + escape_path(path)
        + "') | Select-Object -Property "
        + _PROPERTY_LIST
        + " | Format-List;"
    )


def build_fragments(paths: Sequence[str]) -> list[str]:
    """One fragment per path, in input order."""
    return [build_fragment(path) for path in paths]


def build_command(paths: Sequence[str]) -> str:
    """Concatenate the fragments for *paths* into one command.

    Returns ``""`` for an empty sequence; callers must not run it.
    """
    fragments = build_fragments(paths)
    if not fragments:
        return ""
    return OUTPUT_ENCODING_PREAMBLE + "".join(fragments)


def powershell_argv(command: str) -> list[str]:
    """Argument vector that runs *command* in a non-interactive PowerShell."""
    return [POWERSHELL_EXE, *POWERSHELL_ARGS, command]


def command_line_length(command: str) -> int:
    """Length of the Windows command line that runs *command*."""
    return len(subprocess.list2cmdline(powershell_argv(command)))
