"""Validate site declarations for docsite documentation builds.

This subpackage checks a raw declaration (usually ``website/siteConfig.yaml``)
against the site schema, collects every problem in one pass, and produces an
immutable :class:`SiteConfig` with defaults applied that the site generator
consumes. The primary entry points are :func:`validate`, which returns a
:class:`ValidationResult`, and :func:`load_site_config`, which reads a file and
raises :class:`SiteConfigError` listing every issue.

Examples
--------
>>> from docsite_config.config import resolve_url, validate
>>> result = validate(
...     {
...         "title": "PyTorch-DP",
...         "url": "https://facebookresearch.github.io",
...         "baseUrl": "/pytorch-dp/",
...         "headerLinks": [{"doc": "introduction", "label": "Getting Started"}],
...     }
... )
>>> result.ok
True
>>> result.config.resolve_url("js/mathjax.js")
'/pytorch-dp/js/mathjax.js'
>>> resolve_url("/img/logo.png", {"baseUrl": "/"})
'/img/logo.png'
"""

from .helpers import resolve_url
from .loader import load_raw_config, load_site_config
from .models import (
    ColorsConfig,
    DocLink,
    ExternalLink,
    HighlightConfig,
    IssueKind,
    NavLink,
    OnPageNav,
    SearchIntegration,
    SearchSlot,
    SiteConfig,
    SiteConfigError,
    UserShowcase,
    ValidationIssue,
    ValidationResult,
)
from .serialize import dump_site_config, to_raw
from .validator import normalize, validate

__all__ = [
    "ColorsConfig",
    "DocLink",
    "ExternalLink",
    "HighlightConfig",
    "IssueKind",
    "NavLink",
    "OnPageNav",
    "SearchIntegration",
    "SearchSlot",
    "SiteConfig",
    "SiteConfigError",
    "UserShowcase",
    "ValidationIssue",
    "ValidationResult",
    "dump_site_config",
    "load_raw_config",
    "load_site_config",
    "normalize",
    "resolve_url",
    "to_raw",
    "validate",
]
