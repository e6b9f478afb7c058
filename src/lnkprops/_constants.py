"""WScript.Shell report constants shared by builder, parser and api."""

# ---------------------------------------------------------------------------
# Shortcut files
# ---------------------------------------------------------------------------
SHORTCUT_EXTENSIONS = (".lnk", ".url")

# ---------------------------------------------------------------------------
# WshShortcut properties
# ---------------------------------------------------------------------------
# Requested in this order and returned in this order.  FullName is always
# present (WshURLShortcut only exposes FullName and TargetPath).
PROPERTY_NAMES = (
    "FullName",
    "Arguments",
    "Description",
    "Hotkey",
    "IconLocation",
    "RelativePath",
    "TargetPath",
    "WindowStyle",
    "WorkingDirectory",
)

SENTINEL_FIELD = "FullName"

# ---------------------------------------------------------------------------
# Format-List layout
# ---------------------------------------------------------------------------
# Format-List pads labels to the longest name ("WorkingDirectory", 16 chars)
# and adds " : ", so wrapped values continue at column 19.  The parser reads
# the actual column from each block and uses this only as a fallback.
CONTINUATION_INDENT = 19

# ---------------------------------------------------------------------------
# PowerShell host
# ---------------------------------------------------------------------------
POWERSHELL_EXE = "powershell.exe"
POWERSHELL_ARGS = ("-NoProfile", "-NonInteractive", "-Command")

# CreateProcess lpCommandLine limit, in characters.
MAX_COMMAND_LINE = 32767

# Characters PowerShell accepts as single-quote string delimiters.
SINGLE_QUOTES = ("'", "‘", "’", "‚", "‛")

OUTPUT_ENCODING_PREAMBLE = "[Console]::OutputEncoding = [System.Text.Encoding]::UTF8;"

# ---------------------------------------------------------------------------
# ShowWindow commands (WshShortcut.WindowStyle)
# ---------------------------------------------------------------------------
SW_SHOWNORMAL = 1
SW_MAXIMIZED = 3
SW_MINIMIZED = 7

WINDOW_MODES = {
    SW_SHOWNORMAL: "normal",
    SW_MAXIMIZED: "maximized",
    SW_MINIMIZED: "minimized",
}

DEFAULT_WINDOW_MODE = "normal"
