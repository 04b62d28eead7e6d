"""Cyclopts CLI entrypoint for checking documentation site declarations.

The ``siteconfig`` console script defined here validates a site declaration
before a build starts, prints the normalized form with every default spelled
out, and resolves asset paths against the configured base URL. Typical usage
involves running ``siteconfig check`` locally or in CI so that a broken
declaration halts the pipeline with the full list of problems.

Examples
--------
Validate the default declaration:

>>> from docsite_config.cli import main
>>> main()  # doctest: +SKIP

Resolve script paths against a custom declaration:

>>> from docsite_config.cli import app
>>> app.run(
...     ["resolve", "js/mathjax.js", "--config", "site.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_PATH
from .config import SiteConfigError, dump_site_config, load_site_config

app = App(name="siteconfig", config=cyclopts.config.Env("SITECONFIG_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Validate a site declaration and report every problem.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site declaration", env_var="SITECONFIG_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
) -> None:
    """Validate the declaration at ``config`` and print the outcome.

    Parameters
    ----------
    config : Path, optional
        Path to the YAML declaration (overridable via ``SITECONFIG_CONFIG``).

    Returns
    -------
    None
        Prints ``ok: <title>`` when the declaration is valid.

    Raises
    ------
    SystemExit
        With status 1 after printing one line per issue when the declaration
        is invalid.
    FileNotFoundError
        If ``config`` does not exist.
    """
    try:
        site = load_site_config(config)
    except SiteConfigError as exc:
        print(f"{_format_path(config)}: {len(exc.issues)} problem(s)")
        for issue in exc.issues:
            print(f"  {issue}")
        raise SystemExit(1) from exc
    print(f"ok: {site.title}")


@app.command(help="Print the declaration with every default spelled out.")
def normalize(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site declaration", env_var="SITECONFIG_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write YAML here instead of stdout", env_var="SITECONFIG_OUTPUT"),
    ] = None,
) -> None:
    """Write the normalized declaration as YAML.

    Parameters
    ----------
    config : Path, optional
        Path to the YAML declaration (overridable via ``SITECONFIG_CONFIG``).
    output : Path or None, optional
        Destination file; when ``None`` the YAML is written to stdout.

    Raises
    ------
    SiteConfigError
        If the declaration is invalid.
    """
    site = load_site_config(config)
    if output is None:
        dump_site_config(site, sys.stdout)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as handle:
        dump_site_config(site, handle)
    print(f"wrote {_format_path(output)}")


@app.command(help="Resolve asset paths against the configured base URL.")
def resolve(
    *paths: str,
    config: typ.Annotated[
        Path, Parameter(help="Path to site declaration", env_var="SITECONFIG_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
) -> None:
    """Print each of ``paths`` resolved against the site's ``baseUrl``."""
    site = load_site_config(config)
    for path in paths:
        print(site.resolve_url(path))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``siteconfig`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
