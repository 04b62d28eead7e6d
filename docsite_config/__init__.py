"""Schema and validator for documentation site declarations.

This package checks the declaration a static documentation generator reads
(title, URLs, header navigation, theming, search credentials, script and
stylesheet includes) and hands an immutable, normalized configuration to the
build. It also exposes the ``siteconfig`` CLI used to check declarations
before a build starts.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_site``: Validate a declaration and pass it to a site builder.

Examples
--------
>>> from docsite_config import main
>>> main()  # doctest: +SKIP
>>> from docsite_config import build_site
>>> callable(build_site)
True
"""

from __future__ import annotations

from .build import SiteBuilder, build_site
from .cli import app, main

__all__ = ["SiteBuilder", "app", "build_site", "main"]
