"""Shared fixtures for lnkprops tests."""

import sys

import pytest


def report(*blocks):
    """Join Format-List blocks the way PowerShell prints them (CRLF)."""
    text = ""
    for block in blocks:
        text += "\r\n" + "\r\n".join(block) + "\r\n"
    return text + "\r\n\r\n"


FIREFOX = [
    r"FullName         : C:\Users\Public\Desktop\Firefox.lnk",
    "Arguments        : ",
    "Description      : ",
    "Hotkey           : ",
    r"IconLocation     : C:\Firefox\firefox.exe,0",
    "RelativePath     : ",
    r"TargetPath       : C:\Firefox\firefox.exe",
    "WindowStyle      : 1",
    r"WorkingDirectory : C:\Firefox",
]

WINAMP = [
    r"FullName         : C:\Users\Public\Desktop\Winamp.lnk",
    "Arguments        : ",
    "Description      : ",
    "Hotkey           : ",
    "IconLocation     : ,0",
    "RelativePath     : ",
    r"TargetPath       : C:\Winamp\winamp.exe",
    "WindowStyle      : 7",
    r"WorkingDirectory : C:\Winamp",
]

DAVINCI = [
    r"FullName         : C:\Users\Owner\Desktop\DaVinci Resolve.lnk",
    "Arguments        : --foo=bar",
    "Description      : Video Editor",
    "Hotkey           : CTRL+SHIFT+F10",
    r"IconLocation     : C:\Users\Owner\AppData\Roaming\Microsoft\Installer"
    r"\{00000000-0000-0000-0000-000000000000}\ResolveIco",
    "                   n.exe,0",
    "RelativePath     : ",
    r"TargetPath       : C:\Program Files\Blackmagic Design\DaVinci Resolve\Resolve.exe",
    "WindowStyle      : 3",
    "WorkingDirectory : C:\\Program Files\\Blackmagic Design\\DaVinci Resolve\\",
]


@pytest.fixture
def firefox_raw():
    return report(FIREFOX)


@pytest.fixture
def batch_raw():
    """Report for Firefox.lnk then Winamp.lnk, queried in that order."""
    return report(FIREFOX, WINAMP)


@pytest.fixture
def wrapped_raw():
    """Report whose IconLocation wraps onto a continuation line."""
    return report(DAVINCI)


@pytest.fixture
def on_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")


@pytest.fixture
def messages():
    """A sink that records ``(message, error)`` pairs."""
    calls = []

    def sink(message, error=None):
        calls.append((message, error))

    sink.calls = calls
    return sink


@pytest.fixture
def shortcut_files(tmp_path):
    """Two existing shortcut files: Firefox.lnk and Winamp.url."""
    firefox = tmp_path / "Firefox.lnk"
    winamp = tmp_path / "Winamp.url"
    firefox.write_bytes(b"L\x00\x00\x00")
    winamp.write_text("[InternetShortcut]\nURL=https://winamp.com/\n")
    return [str(firefox), str(winamp)]


@pytest.fixture
def make_report():
    return report
