"""Utility helpers shared by the site configuration validator and models."""

from __future__ import annotations

import collections.abc as cabc
import re
import types
import typing as typ
from urllib.parse import urlsplit

from .._constants import CSS_NAMED_COLORS, GITHUB_BASE

if typ.TYPE_CHECKING:
    from .models import SiteConfig

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
IDENTIFIER_PATTERN = re.compile(r"^[^\s]+$")
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
WEB_SCHEMES = ("http", "https")


def is_absolute_url(value: str) -> bool:
    """Return True when ``value`` carries a scheme or is protocol-relative."""
    return value.startswith("//") or bool(SCHEME_PATTERN.match(value))


def is_web_url(value: str) -> bool:
    """Return True for ``http``/``https`` URLs that name a host."""
    try:
        parsed = urlsplit(value)
    except ValueError:
        return False
    return parsed.scheme in WEB_SCHEMES and bool(parsed.netloc)


def is_color(value: str) -> bool:
    """Return True for hex colors and CSS named colors."""
    if HEX_COLOR_PATTERN.match(value):
        return True
    return value.strip().lower() in CSS_NAMED_COLORS


def is_identifier(value: str) -> bool:
    """Return True for non-empty values containing no whitespace."""
    return bool(IDENTIFIER_PATTERN.match(value))


def has_base_url_shape(value: str) -> bool:
    """Return True when ``value`` starts and ends with a slash."""
    return value.startswith("/") and value.endswith("/")


def build_repository_url(organization: str, project: str) -> str:
    """Build the GitHub URL for ``organization``/``project``."""
    return f"{GITHUB_BASE}/{organization.strip('/')}/{project.strip('/')}"


def _base_url_of(config: SiteConfig | cabc.Mapping[str, typ.Any]) -> str:
    """Return the base URL carried by a SiteConfig or a raw mapping."""
    match config:
        case cabc.Mapping():
            candidate = config.get("baseUrl", config.get("base_url"))
        case _:
            candidate = getattr(config, "base_url", None)
    if isinstance(candidate, str) and candidate:
        return candidate
    return "/"


def resolve_url(path: str, config: SiteConfig | cabc.Mapping[str, typ.Any]) -> str:
    """Resolve ``path`` against the configuration's base URL.

    Parameters
    ----------
    path : str
        Absolute URL (with a scheme or ``//`` prefix) or a path relative to
        the site's base URL.
    config : SiteConfig or Mapping
        Normalized configuration, or a raw mapping carrying ``baseUrl``.

    Returns
    -------
    str
        ``path`` unchanged when absolute or already rooted under the base URL,
        otherwise the base URL and ``path`` joined by exactly one slash.

    Examples
    --------
    >>> resolve_url("/img/x.png", {"baseUrl": "/"})
    '/img/x.png'
    >>> resolve_url("js/a.js", {"baseUrl": "/site/"})
    '/site/js/a.js'
    >>> resolve_url("https://buttons.github.io/buttons.js", {"baseUrl": "/site/"})
    'https://buttons.github.io/buttons.js'
    """
    if is_absolute_url(path):
        return path
    base = _base_url_of(config)
    if path.startswith("/") and path.startswith(base):
        return path
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def freeze_value(value: typ.Any) -> typ.Any:
    """Return a read-only copy of nested mappings and lists in ``value``."""
    match value:
        case cabc.Mapping():
            return types.MappingProxyType(
                {key: freeze_value(item) for key, item in value.items()}
            )
        case list() | tuple():
            return tuple(freeze_value(item) for item in value)
        case _:
            return value


def thaw_value(value: typ.Any) -> typ.Any:
    """Return plain dicts and lists for a value built by :func:`freeze_value`."""
    match value:
        case cabc.Mapping():
            return {key: thaw_value(item) for key, item in value.items()}
        case tuple():
            return [thaw_value(item) for item in value]
        case _:
            return value


__all__ = [
    "HEX_COLOR_PATTERN",
    "IDENTIFIER_PATTERN",
    "SCHEME_PATTERN",
    "build_repository_url",
    "freeze_value",
    "has_base_url_shape",
    "is_absolute_url",
    "is_color",
    "is_identifier",
    "is_web_url",
    "resolve_url",
    "thaw_value",
]
