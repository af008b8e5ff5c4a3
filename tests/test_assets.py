"""
Tests for the Tailwind stylesheet build step (subprocess mocked).
"""

import subprocess
from pathlib import Path
from unittest.mock import Mock

import pytest

from sessioncounter import assets
from sessioncounter.assets import StylesheetBuildError, build_stylesheet, tailwind_command


def test_tailwind_command():
    cmd = tailwind_command("npx", Path("in.css"), Path("out.css"), Path("tw.js"))
    assert cmd == ["npx", "tailwindcss", "-c", "tw.js", "-i", "in.css", "-o", "out.css", "--minify"]

    assert "--minify" not in tailwind_command("npx", Path("a"), Path("b"), Path("c"), minify=False)


def test_build_runs_tailwind(monkeypatch, tmp_path):
    run = Mock(return_value=subprocess.CompletedProcess([], 0, stdout="", stderr=""))
    monkeypatch.setattr(assets.shutil, "which", lambda name: "/usr/bin/npx")
    monkeypatch.setattr(assets.subprocess, "run", run)

    output = build_stylesheet(tmp_path / "style.css")

    assert output == tmp_path / "style.css"
    cmd = run.call_args.args[0]
    assert cmd[:2] == ["/usr/bin/npx", "tailwindcss"]
    assert str(tmp_path / "style.css") in cmd


def test_build_without_npx(monkeypatch):
    monkeypatch.setattr(assets.shutil, "which", lambda name: None)
    with pytest.raises(StylesheetBuildError, match="npx"):
        build_stylesheet()


def test_build_failure(monkeypatch, tmp_path):
    monkeypatch.setattr(assets.shutil, "which", lambda name: "/usr/bin/npx")
    monkeypatch.setattr(
        assets.subprocess, "run",
        Mock(return_value=subprocess.CompletedProcess([], 1, stdout="", stderr="boom")),
    )
    with pytest.raises(StylesheetBuildError, match="boom"):
        build_stylesheet(tmp_path / "style.css")


def test_missing_tailwind_config(monkeypatch, tmp_path):
    run = Mock()
    monkeypatch.setattr(assets.shutil, "which", lambda name: "/usr/bin/npx")
    monkeypatch.setattr(assets.subprocess, "run", run)

    missing = tmp_path / "tailwind.config.js"
    with pytest.raises(StylesheetBuildError, match="tailwind.config.js"):
        build_stylesheet(tmp_path / "style.css", config_file=missing)
    run.assert_not_called()
