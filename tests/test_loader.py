"""Tests for loading site declarations from disk.

These tests write declarations into ``tmp_path`` and load them through
:func:`docsite_config.config.load_site_config`, covering the bundled
``website/siteConfig.yaml``, JSON input, empty files, and YAML written back
out by :func:`docsite_config.config.dump_site_config`.
"""

from __future__ import annotations

import io
from pathlib import Path
from textwrap import dedent

import pytest

from docsite_config.config import (
    IssueKind,
    SearchIntegration,
    SiteConfigError,
    dump_site_config,
    load_raw_config,
    load_site_config,
)

BUNDLED_CONFIG = Path(__file__).resolve().parents[1] / "website" / "siteConfig.yaml"


def _write(tmp_path: Path, text: str, name: str = "siteConfig.yaml") -> Path:
    path = tmp_path / name
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_bundled_declaration_is_valid() -> None:
    """The declaration shipped with the repo should load cleanly."""
    config = load_site_config(BUNDLED_CONFIG)
    assert config.title == "PyTorch-DP"
    assert config.search_integration == SearchIntegration(
        api_key="207c27d819f967749142d8611de7cb19", index_name="pytorch-dp"
    )
    assert config.search_slot_index == len(config.header_links) - 1
    assert config.disable_header_title is True
    assert config.wrap_pages_html is True
    assert config.resolved_scripts()[1] == "/js/code_block_buttons.js"
    assert config.colors is not None
    assert config.colors.primary_color == "#4283f4"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "missing.yaml")


def test_empty_file_reports_required_fields(tmp_path: Path) -> None:
    path = tmp_path / "siteConfig.yaml"
    path.write_text("", encoding="utf-8")
    assert load_raw_config(path) == {}
    with pytest.raises(SiteConfigError) as excinfo:
        load_site_config(path)
    assert {issue.kind for issue in excinfo.value.issues} == {IssueKind.MISSING_FIELD}


def test_invalid_declaration_lists_every_issue(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Docs
        url: https://example.com
        baseUrl: docs
        headerLinks:
          - doc: intro
            href: https://x
          - search: true
          - search: true
        searchIntegration:
          apiKey: ''
          indexName: docs
        """,
    )
    with pytest.raises(SiteConfigError) as excinfo:
        load_site_config(path)
    paths = [issue.path for issue in excinfo.value.issues]
    assert paths == [
        "baseUrl",
        "headerLinks[2]",
        "headerLinks[0]",
        "searchIntegration.apiKey",
    ], f"Unexpected issue paths: {paths!r}"


def test_json_declaration_is_accepted(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        {"title": "Docs", "url": "https://example.com", "baseUrl": "/",
         "headerLinks": [{"search": true}], "scrollToTop": true}
        """,
        name="siteConfig.json",
    )
    config = load_site_config(path)
    assert config.scroll_to_top is True
    assert config.search_slot_index == 0


def test_dumped_yaml_loads_back_unchanged(tmp_path: Path) -> None:
    """Writing a normalized config and reading it again should be lossless."""
    config = load_site_config(BUNDLED_CONFIG)
    buffer = io.StringIO()
    dump_site_config(config, buffer)
    text = buffer.getvalue()
    assert "primaryColor: '#4283f4'" in text
    assert "cleanUrl: true" in text

    path = tmp_path / "normalized.yaml"
    path.write_text(text, encoding="utf-8")
    assert load_site_config(path) == config
