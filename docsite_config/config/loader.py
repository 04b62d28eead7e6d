"""Load site declaration YAML into a validated :class:`SiteConfig`."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .validator import normalize

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import SiteConfig


def load_raw_config(path: Path) -> typ.Any:
    """Parse the declaration at ``path`` without validating it.

    An empty document is returned as an empty mapping. JSON declarations are
    accepted too since YAML 1.2 is a superset of JSON.

    Raises
    ------
    FileNotFoundError
        If no file exists at ``path``.
    YAMLError
        If the content cannot be parsed.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    return {} if loaded is None else loaded


def load_site_config(path: Path) -> SiteConfig:
    """Load and validate the site declaration stored at ``path``.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML (or JSON) declaration, for example
        ``website/siteConfig.yaml``.

    Returns
    -------
    SiteConfig
        Normalized configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the declaration breaks any schema rule; every issue is attached.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite_config.config import load_site_config
    >>> site = load_site_config(Path("website/siteConfig.yaml"))  # doctest: +SKIP
    >>> site.resolved_scripts()[:1]  # doctest: +SKIP
    ['https://buttons.github.io/buttons.js']
    """
    return normalize(load_raw_config(path))


__all__ = ["load_raw_config", "load_site_config"]
