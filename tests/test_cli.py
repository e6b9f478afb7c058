"""Tests for the lnkprops CLI."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from lnkprops import api
from lnkprops.cli import main

SRC = str(Path(__file__).resolve().parent.parent / "src")


def run_cli(*args):
    """Run ``lnkprops`` as a subprocess and return CompletedProcess."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [SRC, env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "lnkprops", *args],
        capture_output=True,
        text=True,
        timeout=30,
        env=env,
    )


@pytest.fixture
def fake_powershell(monkeypatch, on_windows, batch_raw):
    """Replace PowerShell with the Firefox/Winamp report."""
    seen = []

    def fake_run_powershell(command, *, timeout=None):
        seen.append((command, timeout))
        return batch_raw

    monkeypatch.setattr(api, "run_powershell", fake_run_powershell)
    return seen


class TestSubprocess:
    def test_no_args_prints_help(self):
        result = run_cli()
        assert result.returncode == 1
        assert "usage" in result.stdout.lower()

    def test_help(self):
        result = run_cli("--help")
        assert result.returncode == 0
        assert "--translate" in result.stdout

    @pytest.mark.skipif(sys.platform == "win32", reason="checks non-Windows refusal")
    def test_non_windows_fails(self, shortcut_files):
        result = run_cli(*shortcut_files)
        assert result.returncode == 1
        assert "Platform is not Windows" in result.stderr


class TestMain:
    """In-process runs with PowerShell faked out."""

    def test_text_output(self, fake_powershell, shortcut_files, capsys):
        main(shortcut_files)
        out = capsys.readouterr().out
        assert out.index("Firefox.lnk") < out.index("Winamp.lnk")
        assert r"TargetPath       : C:\Winamp\winamp.exe" in out
        assert "FILE: " in out

    def test_json_output(self, fake_powershell, shortcut_files, capsys):
        main([*shortcut_files, "--json"])
        records = json.loads(capsys.readouterr().out)
        assert [r["TargetPath"] for r in records] == [
            r"C:\Firefox\firefox.exe",
            r"C:\Winamp\winamp.exe",
        ]

    def test_translated_json(self, fake_powershell, shortcut_files, capsys):
        assert main([*shortcut_files, "--json", "--translate"]) is None
        infos = json.loads(capsys.readouterr().out)
        assert [i["window_mode"] for i in infos] == ["normal", "minimized"]
        assert infos[0]["target_path"] == r"C:\Firefox\firefox.exe"

    def test_translated_text(self, fake_powershell, shortcut_files, capsys):
        assert main([*shortcut_files, "-t"]) is None
        out = capsys.readouterr().out
        assert "window_mode" in out
        assert "minimized" in out

    @pytest.mark.parametrize(
        "flags", [[], ["--json"], ["--translate"], ["--json", "--translate"]]
    )
    def test_success_returns_normally(self, fake_powershell, shortcut_files, flags):
        assert main([*shortcut_files, *flags]) is None

    def test_indent_width_passed(self, monkeypatch, on_windows, shortcut_files, capsys):
        seen = {}

        def fake_get_properties(files, **kwargs):
            seen.update(kwargs)
            return [{"FullName": files[0]}]

        monkeypatch.setattr("lnkprops.cli.get_properties", fake_get_properties)
        main([*shortcut_files, "--indent-width", "13"])
        assert seen["indent"] == 13
        main(shortcut_files)
        assert seen["indent"] is None

    def test_timeout_passed(self, fake_powershell, shortcut_files, capsys):
        main([*shortcut_files, "--timeout", "2.5"])
        assert fake_powershell[0][1] == 2.5

    def test_bad_timeout(self, shortcut_files, capsys):
        with pytest.raises(SystemExit) as exc:
            main([*shortcut_files, "--timeout", "-1"])
        assert exc.value.code == 2

    def test_no_result_exits_1(self, fake_powershell, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.lnk")])
        assert exc.value.code == 1
        assert "exists" in capsys.readouterr().err
        assert fake_powershell == []
