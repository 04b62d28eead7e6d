"""Hand a validated configuration to the external site generator.

The generator itself lives outside this package; it only has to provide a
``build`` method accepting a :class:`~docsite_config.config.SiteConfig`.
:func:`build_site` guarantees the generator is never invoked with an invalid
declaration, so a broken configuration can never yield a partial site.
"""

from __future__ import annotations

import typing as typ

from .config import SiteConfig, normalize

T_co = typ.TypeVar("T_co", covariant=True)


class SiteBuilder(typ.Protocol[T_co]):
    """Collaborator that renders a static site from a configuration."""

    def build(self, config: SiteConfig) -> T_co:
        """Produce the deployable site for ``config``."""
        ...


def build_site(raw: object, builder: SiteBuilder[T_co]) -> T_co:
    """Validate ``raw`` and pass the resulting configuration to ``builder``.

    Raises
    ------
    SiteConfigError
        If ``raw`` is invalid. ``builder.build`` is not called in that case.
    """
    config = normalize(raw)
    return builder.build(config)


__all__ = ["SiteBuilder", "build_site"]
