"""lnkprops -- read Windows shortcut properties through PowerShell."""

__version__ = "0.1.0"

from .api import (
    ShortcutInfo,
    default_sink,
    get_properties,
    run_powershell,
    translate,
    translate_record,
)
from .builder import (
    build_command,
    build_fragment,
    build_fragments,
    command_line_length,
    escape_path,
)
from .parser import (
    format_record,
    parse_raw,
    parse_segment,
    repair_continuations,
    split_key_value,
    split_segments,
    value_column,
)

__all__ = [
    "get_properties",
    "translate",
    "translate_record",
    "run_powershell",
    "default_sink",
    "ShortcutInfo",
    "build_command",
    "build_fragment",
    "build_fragments",
    "escape_path",
    "command_line_length",
    "parse_raw",
    "parse_segment",
    "split_segments",
    "repair_continuations",
    "split_key_value",
    "value_column",
    "format_record",
    "__version__",
]
