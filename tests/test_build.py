"""Tests for handing validated configurations to a site builder."""

from __future__ import annotations

import pytest

from docsite_config import build_site
from docsite_config.config import SiteConfig, SiteConfigError


class RecordingBuilder:
    """Site builder double that records every configuration it receives."""

    def __init__(self) -> None:
        self.calls: list[SiteConfig] = []

    def build(self, config: SiteConfig) -> str:
        self.calls.append(config)
        return f"built {config.title}"


def test_valid_declaration_reaches_builder() -> None:
    builder = RecordingBuilder()
    result = build_site(
        {"title": "Docs", "url": "https://example.com", "baseUrl": "/"}, builder
    )
    assert result == "built Docs"
    assert len(builder.calls) == 1
    assert builder.calls[0].clean_url is True


def test_invalid_declaration_never_reaches_builder() -> None:
    """No partial site should be produced from an invalid declaration."""
    builder = RecordingBuilder()
    with pytest.raises(SiteConfigError):
        build_site({"title": "Docs", "baseUrl": "/"}, builder)
    assert builder.calls == [], "Builder must not run for invalid configs"
