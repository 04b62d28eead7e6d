"""Serialize normalized site configuration back into declaration form."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import thaw_value
from .nav import nav_link_to_raw

if typ.TYPE_CHECKING:
    from .models import SiteConfig, UserShowcase


def to_raw(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the camelCase declaration mapping for ``config``.

    Defaults are written out explicitly and unset optional values are omitted,
    so validating the result yields a configuration equal to ``config``.
    Unrecognised keys preserved in ``config.extra`` follow the known fields.
    """
    raw: dict[str, typ.Any] = {
        "title": config.title,
        "tagline": config.tagline,
        "url": config.url,
        "baseUrl": config.base_url,
        "cleanUrl": config.clean_url,
        "organizationName": config.organization_name,
        "projectName": config.project_name,
        "gaTrackingId": config.ga_tracking_id,
        "headerLinks": [nav_link_to_raw(link) for link in config.header_links],
        "users": [_user_to_raw(user) for user in config.users],
    }
    if config.search_integration is not None:
        raw["searchIntegration"] = {
            "apiKey": config.search_integration.api_key,
            "indexName": config.search_integration.index_name,
        }
    raw.update(
        headerIcon=config.header_icon,
        footerIcon=config.footer_icon,
        favicon=config.favicon,
    )
    if config.colors is not None:
        raw["colors"] = {
            "primaryColor": config.colors.primary_color,
            "secondaryColor": config.colors.secondary_color,
        }
    if config.highlight is not None:
        raw["highlight"] = {"theme": config.highlight.theme}
    raw.update(
        scripts=list(config.scripts),
        stylesheets=list(config.stylesheets),
        onPageNav=config.on_page_nav.value if config.on_page_nav else None,
        scrollToTop=config.scroll_to_top,
        docsSideNavCollapsible=config.docs_side_nav_collapsible,
        editUrl=config.edit_url,
        disableHeaderTitle=config.disable_header_title,
        ogImage=config.og_image,
        twitterImage=config.twitter_image,
        wrapPagesHTML=config.wrap_pages_html,
    )
    cleaned = {key: value for key, value in raw.items() if value is not None}
    cleaned.update(thaw_value(config.extra))
    return cleaned


def _user_to_raw(user: UserShowcase) -> dict[str, typ.Any]:
    payload = {
        "caption": user.caption,
        "image": user.image,
        "infoLink": user.info_link,
        "pinned": user.pinned,
    }
    return {key: value for key, value in payload.items() if value is not None}


def _build_block_yaml() -> YAML:
    yaml = YAML()
    yaml.default_flow_style = False
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def dump_site_config(config: SiteConfig, stream: typ.TextIO) -> None:
    """Write ``config`` to ``stream`` as a block-style YAML declaration."""
    _build_block_yaml().dump(to_raw(config), stream)


__all__ = ["dump_site_config", "to_raw"]
