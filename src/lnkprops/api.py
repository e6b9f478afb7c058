"""Query shortcut properties through PowerShell and translate the results."""

import functools
import logging
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from ._constants import DEFAULT_WINDOW_MODE, MAX_COMMAND_LINE, WINDOW_MODES
from ._types import PathArg, PropertyRecord, Runner, Sink
from ._util import is_list_of_mappings, is_list_of_strings, normalize_file
from .builder import build_command, command_line_length, powershell_argv
from .parser import parse_raw

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class ShortcutInfo:
    """A shortcut's properties under friendlier names."""

    file_path: str = ""
    arguments: str = ""
    comment: str = ""
    hotkey: str = ""
    icon: str = ""
    relative_path: str = ""
    target_path: str = ""
    window_mode: str = DEFAULT_WINDOW_MODE
    working_directory: str = ""


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------
def default_sink(message: str, error: object | None = None) -> None:
    """Print *message* (and *error*, if any) to stderr."""
    banner = "________________________________\nlnkprops:\n"
    if error is None:
        print(banner + message, file=sys.stderr)
    else:
        print(banner + message, error, file=sys.stderr)


def _report(sink: Sink | None, message: str, error: object | None = None) -> None:
    if callable(sink):
        sink(message, error)
    else:
        default_sink(message, error)


def _sink_is_valid(sink: object) -> bool:
    if sink is not None and not callable(sink):
        _report(None, "The logger must be a callable or None")
        return False
    return True


# ---------------------------------------------------------------------------
# Process execution
# ---------------------------------------------------------------------------
def run_powershell(command: str, *, timeout: float | None = None) -> str:
    """Run *command* in PowerShell and return its decoded stdout.

    Raises ``OSError`` if PowerShell cannot be started and
    ``subprocess.SubprocessError`` on a non-zero exit or timeout.
    """
    result = subprocess.run(
        powershell_argv(command),
        capture_output=True,
        check=True,
        timeout=timeout,
    )
    return result.stdout.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------
def _inputs_are_valid(file_path: object, sink: object) -> bool:
    valid = _sink_is_valid(sink)
    report_to = sink if valid else None
    if sys.platform != "win32":
        _report(report_to, "Platform is not Windows")
        valid = False
    if not (
        (isinstance(file_path, str) and file_path) or is_list_of_strings(file_path)
    ):
        _report(report_to, "First argument must be a string or list of strings")
        valid = False
    return valid


def _normalize_all(paths: list[str], sink: Sink | None) -> list[str]:
    normalized = []
    for path in paths:
        full = normalize_file(path)
        if full is None:
            _report(
                sink, f"File path must point to a .lnk or .url file that exists: {path!r}"
            )
            continue
        normalized.append(full)
    return normalized


def get_properties(
    file_path: PathArg,
    logger: Sink | None = None,
    *,
    runner: Runner | None = None,
    timeout: float | None = None,
    indent: int | None = None,
) -> list[PropertyRecord] | None:
    """Return the properties of one or more Windows shortcuts.

    *file_path* is a path or a list of paths to ``.lnk``/``.url`` files.
    Records come back in input order, one per valid path; invalid paths are
    reported through *logger* and skipped.  Returns None, after reporting,
    when the input is invalid, nothing valid remains, or PowerShell fails.

    *logger* is called as ``logger(message, error)``; it defaults to
    :func:`default_sink`.  *runner* replaces :func:`run_powershell`.

    All paths go to one PowerShell process, whose command line Windows
    caps at 32767 characters; a batch that would exceed it is reported and
    returns None without starting PowerShell.  Split large batches.
    """
    if not _inputs_are_valid(file_path, logger):
        return None
    paths = [file_path] if isinstance(file_path, str) else file_path

    command = build_command(_normalize_all(paths, logger))
    if not command:
        return None
    length = command_line_length(command)
    if length > MAX_COMMAND_LINE:
        _report(
            logger,
            f"PowerShell command line would be {length} characters "
            f"(limit {MAX_COMMAND_LINE}); query fewer files at once",
        )
        return None

    log.debug("running PowerShell command: %s", command)
    if runner is None:
        runner = functools.partial(run_powershell, timeout=timeout)
    try:
        raw = runner(command)
    except (OSError, subprocess.SubprocessError) as exc:
        _report(logger, "Failed to run PowerShell command to get shortcut properties", exc)
        return None
    return parse_raw(raw, indent)


def _window_mode(style: object) -> str:
    try:
        code = int(str(style).strip())
    except ValueError:
        return DEFAULT_WINDOW_MODE
    return WINDOW_MODES.get(code, DEFAULT_WINDOW_MODE)


def translate_record(record: Mapping[str, object]) -> ShortcutInfo:
    """Rename one record's fields and decode its window style."""

    def text(key: str) -> str:
        value = record.get(key)
        return str(value) if value else ""

    return ShortcutInfo(
        file_path=text("FullName"),
        arguments=text("Arguments"),
        comment=text("Description"),
        hotkey=text("Hotkey"),
        icon=text("IconLocation"),
        relative_path=text("RelativePath"),
        target_path=text("TargetPath"),
        window_mode=_window_mode(record.get("WindowStyle")),
        working_directory=text("WorkingDirectory"),
    )


def translate(
    records: list[PropertyRecord], logger: Sink | None = None
) -> list[ShortcutInfo] | None:
    """Translate records from :func:`get_properties` into :class:`ShortcutInfo`.

    Returns None, after reporting through *logger*, unless *records* is a
    non-empty list of mappings.
    """
    valid = _sink_is_valid(logger)
    if not is_list_of_mappings(records):
        _report(logger if valid else None, "The records must be a list of mappings")
        valid = False
    if not valid:
        return None
    return [translate_record(record) for record in records]
