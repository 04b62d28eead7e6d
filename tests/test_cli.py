"""Tests for the ``siteconfig`` command-line entry points."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from docsite_config import cli
from docsite_config.config import load_site_config


def _write_config(tmp_path: Path, base_url: str = "/site/") -> Path:
    path = tmp_path / "siteConfig.yaml"
    path.write_text(
        dedent(
            f"""
            title: Example Docs
            url: https://docs.example.com
            baseUrl: {base_url}
            headerLinks:
              - doc: introduction
                label: Getting Started
              - search: true
            scripts:
              - js/code_block_buttons.js
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def test_check_reports_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.check(config=_write_config(tmp_path))
    assert capsys.readouterr().out.strip() == "ok: Example Docs"


def test_check_lists_issues_and_exits(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """An invalid declaration should print every issue and exit non-zero."""
    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=_write_config(tmp_path, base_url="site"))
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "1 problem(s)" in out
    assert "baseUrl: PatternMismatch:" in out


def test_normalize_writes_yaml_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = _write_config(tmp_path)
    output = tmp_path / "out" / "normalized.yaml"
    cli.normalize(config=source, output=output)
    assert output.exists()
    assert load_site_config(output) == load_site_config(source)
    assert "wrote" in capsys.readouterr().out
    text = output.read_text(encoding="utf-8")
    assert "wrapPagesHTML: false" in text


def test_normalize_prints_to_stdout(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.normalize(config=_write_config(tmp_path))
    out = capsys.readouterr().out
    assert out.startswith("title: Example Docs")
    assert "cleanUrl: true" in out


def test_resolve_prints_each_path(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.resolve(
        "js/a.js",
        "https://buttons.github.io/buttons.js",
        config=_write_config(tmp_path),
    )
    assert capsys.readouterr().out.splitlines() == [
        "/site/js/a.js",
        "https://buttons.github.io/buttons.js",
    ]
