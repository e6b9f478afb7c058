"""Parse the Format-List report printed by PowerShell into property records.

A report for two shortcuts looks like this (``\\r\\n`` line endings)::

    <blank>
    FullName         : C:\\Users\\Public\\Desktop\\Firefox.lnk
    Arguments        :
    ...
    WorkingDirectory : C:\\Program Files\\Mozilla Firefox
    <blank>
    FullName         : C:\\Users\\Public\\Desktop\\Winamp.lnk
    ...

Values longer than the console width are wrapped onto the next line,
indented to the value column and without a label::

    IconLocation     : C:\\Users\\Owner\\AppData\\Roaming\\Microsoft\\Installer\\{00000000-0000-0000-0000-000000000000}\\ResolveIco
                       n.exe,0
"""

import logging
import re

from ._constants import CONTINUATION_INDENT, PROPERTY_NAMES, SENTINEL_FIELD
from ._types import PropertyRecord

log = logging.getLogger(__name__)

_KNOWN = frozenset(PROPERTY_NAMES)


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _to_text(raw: str | bytes | bytearray | None) -> str:
    if raw is None:
        return ""
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("utf-8", errors="replace")
    return str(raw)


# ---------------------------------------------------------------------------
# Stage 1: segments
# ---------------------------------------------------------------------------
def split_segments(raw: str, sentinel: str = SENTINEL_FIELD) -> list[str]:
    """Split *raw* into one block per shortcut.

    Every block starts with the *sentinel* line.  Anything before the first
    sentinel is dropped; text without a sentinel yields no blocks.
    """
    text = _normalize_newlines(raw)
    pattern = re.compile(rf"^{re.escape(sentinel)}[ \t]*:", re.MULTILINE)
    starts = [m.start() for m in pattern.finditer(text)]
    ends = starts[1:] + [len(text)]
    return [text[start:end] for start, end in zip(starts, ends)]


# ---------------------------------------------------------------------------
# Stage 2: wrapped values
# ---------------------------------------------------------------------------
def repair_continuations(
    lines: list[str], indent: int = CONTINUATION_INDENT
) -> list[str]:
    """Fold wrapped value lines back into the line they continue.

    A line starting with *indent* spaces loses that prefix and is appended
    to the previous non-empty line.  Empty lines are dropped.
    """
    prefix = " " * indent
    out: list[str] = []
    for line in lines:
        if indent > 0 and line.startswith(prefix):
            rest = line[indent:]
            if out:
                out[-1] += rest
                continue
            # Nothing to continue; keep the text as a line of its own.
            line = rest.strip()
        if line.strip():
            out.append(line)
    return out


# ---------------------------------------------------------------------------
# Stage 3: key/value
# ---------------------------------------------------------------------------
def split_key_value(line: str) -> tuple[str, str]:
    """Split *line* on its first colon.

    ``TargetPath : C:\\x.exe`` -> ``("TargetPath", "C:\\x.exe")``.  A line
    without a colon is all key with an empty value.
    """
    key, _, value = line.partition(":")
    return key.strip(), value.strip()


def empty_record() -> PropertyRecord:
    return {name: "" for name in PROPERTY_NAMES}


def value_column(line: str) -> int | None:
    """Column where a labelled line's value starts, or None if unlabelled.

    Format-List prints ``Label<pad> : value``; the value starts two
    columns after the colon.
    """
    key, sep, _ = line.partition(":")
    if not sep or key.strip() not in _KNOWN:
        return None
    return len(key) + 2


def parse_segment(segment: str, indent: int | None = None) -> PropertyRecord:
    """Decode one shortcut block into a record holding every known property.

    Wrapped values continue at the value column of the block's first line
    unless *indent* is given; blocks without a labelled first line fall
    back to ``CONTINUATION_INDENT``.
    """
    record = empty_record()
    lines = _normalize_newlines(segment).split("\n")
    if indent is None:
        indent = next(
            (value_column(line) for line in lines if line.strip()), None
        ) or CONTINUATION_INDENT
    for line in repair_continuations(lines, indent):
        key, value = split_key_value(line)
        if key in _KNOWN:
            record[key] = value
        else:
            log.debug("ignoring unrecognized report line %r", line)
    return record


def parse_raw(
    raw: str | bytes | None,
    indent: int | None = None,
    sentinel: str = SENTINEL_FIELD,
) -> list[PropertyRecord]:
    """Parse a full PowerShell report into records, one per shortcut block.

    Records come back in the order the blocks appear, which is the order
    the shortcuts were queried in.  Malformed text degrades to empty values
    and never raises.
    """
    text = _to_text(raw)
    segments = split_segments(text, sentinel)
    log.debug("found %d shortcut block(s) in %d chars", len(segments), len(text))
    return [parse_segment(segment, indent) for segment in segments]


# ---------------------------------------------------------------------------
# Human-readable formatter
# ---------------------------------------------------------------------------
def format_record(record: PropertyRecord) -> str:
    """Return *record* as aligned ``Key : value`` lines."""
    keys = list(PROPERTY_NAMES) + [k for k in record if k not in _KNOWN]
    width = max(len(k) for k in keys)
    lines = []
    for key in keys:
        value = record.get(key, "")
        lines.append(f"{key.ljust(width)} : {value}".rstrip())
    return "\n".join(lines)
