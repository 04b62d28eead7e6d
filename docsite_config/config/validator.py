"""Validate raw site declarations and build normalized :class:`SiteConfig` values.

Validation runs in fixed phases so that issues are reported in a predictable
order: required fields, field types, value shapes, duplicate search slots,
header link variants, search credentials, and finally enumerated values.
Every phase runs even when earlier phases found problems, so a single pass
reports everything wrong with a declaration. Values that failed an earlier
phase are skipped by the later ones rather than reported twice.

Examples
--------
>>> from docsite_config.config import validate
>>> result = validate({"title": "Docs", "url": "https://example.com", "baseUrl": "/"})
>>> result.ok, result.config.clean_url
(True, True)
>>> [str(issue) for issue in validate({"baseUrl": "docs"}).issues][:1]
["title: MissingField: 'title' is required."]
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import (
    BOOLEAN_DEFAULTS,
    LEGACY_SEARCH_KEY,
    ON_PAGE_NAV_STYLES,
    OPTIONAL_TEXT_FIELDS,
    REQUIRED_FIELDS,
)
from .helpers import (
    freeze_value,
    has_base_url_shape,
    is_color,
    is_identifier,
    is_web_url,
)
from .issues import IssueCollector, item_path
from .models import (
    ColorsConfig,
    HighlightConfig,
    IssueKind,
    OnPageNav,
    SearchIntegration,
    SiteConfig,
    UserShowcase,
    ValidationResult,
)
from .nav import (
    HEADER_LINKS_KEY,
    build_nav_link,
    check_entry_types,
    check_search_slots,
    check_variant,
)
from .serialize import to_raw

SEARCH_KEY = "searchIntegration"
TEXT_FIELDS = (*REQUIRED_FIELDS, *OPTIONAL_TEXT_FIELDS, "editUrl", "onPageNav")
URL_LIST_FIELDS = ("scripts", "stylesheets")
SUB_FIELDS: dict[str, tuple[str, ...]] = {
    SEARCH_KEY: ("apiKey", "indexName"),
    "colors": ("primaryColor", "secondaryColor"),
}
KNOWN_KEYS = frozenset(
    (
        *TEXT_FIELDS,
        *BOOLEAN_DEFAULTS,
        *URL_LIST_FIELDS,
        HEADER_LINKS_KEY,
        "users",
        SEARCH_KEY,
        LEGACY_SEARCH_KEY,
        "colors",
        "highlight",
    )
)
USER_TEXT_FIELDS = ("caption", "image", "infoLink")


def validate(raw: object) -> ValidationResult:
    """Validate a raw declaration and normalize it into a :class:`SiteConfig`.

    Parameters
    ----------
    raw : object
        Parsed declaration, normally a mapping with camelCase keys. A
        :class:`SiteConfig` is accepted too and re-validated through its raw
        form.

    Returns
    -------
    ValidationResult
        ``config`` populated with defaults applied when the declaration is
        valid; otherwise ``issues`` lists every problem found.
    """
    if isinstance(raw, SiteConfig):
        raw = to_raw(raw)
    collector = IssueCollector()
    if not isinstance(raw, cabc.Mapping):
        collector.wrong_type("", "a mapping", raw)
        return ValidationResult(issues=collector.freeze())

    search_key = _search_key(raw)
    _check_required(raw, collector)
    _check_types(raw, search_key, collector)
    _check_shapes(raw, collector)
    links = _present(raw, HEADER_LINKS_KEY)
    if isinstance(links, list | tuple):
        check_search_slots(links, collector)
        for index, entry in enumerate(links):
            check_variant(index, entry, collector)
    _check_search_credentials(raw, search_key, collector)
    _check_on_page_nav(raw, collector)

    if collector:
        return ValidationResult(issues=collector.freeze())
    return ValidationResult(config=_build_site_config(raw, search_key))


def _present(raw: cabc.Mapping[str, typ.Any], key: str) -> typ.Any:
    """Return ``raw[key]`` treating explicit nulls as absent."""
    return raw.get(key)


def _search_key(raw: cabc.Mapping[str, typ.Any]) -> str:
    """Return the key holding search credentials, preferring the current name."""
    has_current = _present(raw, SEARCH_KEY) is not None
    if not has_current and _present(raw, LEGACY_SEARCH_KEY) is not None:
        return LEGACY_SEARCH_KEY
    return SEARCH_KEY


def _check_required(raw: cabc.Mapping[str, typ.Any], collector: IssueCollector) -> None:
    for key in REQUIRED_FIELDS:
        if _present(raw, key) is None:
            collector.missing(key)


def _check_types(
    raw: cabc.Mapping[str, typ.Any], search_key: str, collector: IssueCollector
) -> None:
    """Report every top-level and nested value of the wrong type."""
    for key in TEXT_FIELDS:
        value = _present(raw, key)
        if value is not None and not isinstance(value, str):
            collector.wrong_type(key, "text", value)
    for key in BOOLEAN_DEFAULTS:
        value = _present(raw, key)
        if value is not None and not isinstance(value, bool):
            collector.wrong_type(key, "a boolean", value)

    links = _present(raw, HEADER_LINKS_KEY)
    if _expect_sequence(HEADER_LINKS_KEY, links, collector):
        for index, entry in enumerate(links):
            check_entry_types(index, entry, collector)

    for key in URL_LIST_FIELDS:
        entries = _present(raw, key)
        if _expect_sequence(key, entries, collector):
            for index, entry in enumerate(entries):
                if not isinstance(entry, str):
                    collector.wrong_type(item_path(key, index), "text", entry)

    users = _present(raw, "users")
    if _expect_sequence("users", users, collector):
        for index, entry in enumerate(users):
            _check_user_types(index, entry, collector)

    record_fields = {
        search_key: SUB_FIELDS[SEARCH_KEY],
        "colors": SUB_FIELDS["colors"],
    }
    for key, fields in record_fields.items():
        payload = _present(raw, key)
        if payload is None:
            continue
        if not isinstance(payload, cabc.Mapping):
            collector.wrong_type(key, "a mapping", payload)
            continue
        for field in fields:
            value = payload.get(field)
            if value is None:
                collector.missing(f"{key}.{field}")
            elif not isinstance(value, str):
                collector.wrong_type(f"{key}.{field}", "text", value)

    highlight = _present(raw, "highlight")
    if highlight is not None:
        if not isinstance(highlight, cabc.Mapping):
            collector.wrong_type("highlight", "a mapping", highlight)
        else:
            theme = highlight.get("theme")
            if theme is not None and not isinstance(theme, str):
                collector.wrong_type("highlight.theme", "text", theme)


def _expect_sequence(key: str, value: object, collector: IssueCollector) -> bool:
    """Return True when ``value`` is a list, reporting other non-null values."""
    if value is None:
        return False
    if isinstance(value, list | tuple):
        return True
    collector.wrong_type(key, "a list", value)
    return False


def _check_user_types(index: int, entry: object, collector: IssueCollector) -> None:
    path = item_path("users", index)
    if not isinstance(entry, cabc.Mapping):
        collector.wrong_type(path, "a mapping", entry)
        return
    if entry.get("caption") is None:
        collector.missing(item_path("users", index, "caption"))
    for field in USER_TEXT_FIELDS:
        value = entry.get(field)
        if value is not None and not isinstance(value, str):
            collector.wrong_type(item_path("users", index, field), "text", value)
    pinned = entry.get("pinned")
    if pinned is not None and not isinstance(pinned, bool):
        collector.wrong_type(item_path("users", index, "pinned"), "a boolean", pinned)


def _check_shapes(raw: cabc.Mapping[str, typ.Any], collector: IssueCollector) -> None:
    """Report well-typed values whose content breaks a pattern."""
    title = _present(raw, "title")
    if isinstance(title, str) and not title.strip():
        collector.mismatch("title", "'title' must not be empty.")

    base_url = _present(raw, "baseUrl")
    if isinstance(base_url, str) and not has_base_url_shape(base_url):
        collector.mismatch(
            "baseUrl",
            f"'baseUrl' must start and end with '/', got {base_url!r}.",
        )

    for key in ("url", "editUrl"):
        value = _present(raw, key)
        if isinstance(value, str) and not is_web_url(value):
            collector.mismatch(
                key,
                f"'{key}' must be an absolute http(s) URL with a host, "
                f"got {value!r}.",
            )

    for key in ("organizationName", "projectName"):
        value = _present(raw, key)
        if isinstance(value, str) and not is_identifier(value):
            collector.mismatch(
                key, f"'{key}' must be a non-empty identifier, got {value!r}."
            )

    for key in URL_LIST_FIELDS:
        entries = _present(raw, key)
        if not isinstance(entries, list | tuple):
            continue
        for index, entry in enumerate(entries):
            if isinstance(entry, str) and not is_identifier(entry):
                path = item_path(key, index)
                collector.mismatch(
                    path, f"'{path}' must be a URL without whitespace, got {entry!r}."
                )

    colors = _present(raw, "colors")
    if isinstance(colors, cabc.Mapping):
        for field in SUB_FIELDS["colors"]:
            value = colors.get(field)
            if isinstance(value, str) and not is_color(value):
                collector.mismatch(
                    f"colors.{field}",
                    f"'colors.{field}' must be a hex or named color, got {value!r}.",
                )


def _check_search_credentials(
    raw: cabc.Mapping[str, typ.Any], search_key: str, collector: IssueCollector
) -> None:
    if search_key == SEARCH_KEY and _present(raw, LEGACY_SEARCH_KEY) is not None:
        collector.add(
            SEARCH_KEY,
            IssueKind.AMBIGUOUS_VARIANT,
            f"Use either '{SEARCH_KEY}' or '{LEGACY_SEARCH_KEY}', not both.",
        )
    payload = _present(raw, search_key)
    if not isinstance(payload, cabc.Mapping):
        return
    for field in SUB_FIELDS[SEARCH_KEY]:
        value = payload.get(field)
        if isinstance(value, str) and not value.strip():
            collector.mismatch(
                f"{search_key}.{field}",
                f"'{search_key}.{field}' must not be empty when search is enabled.",
            )


def _check_on_page_nav(
    raw: cabc.Mapping[str, typ.Any], collector: IssueCollector
) -> None:
    value = _present(raw, "onPageNav")
    if isinstance(value, str) and value not in ON_PAGE_NAV_STYLES:
        allowed = ", ".join(repr(style) for style in ON_PAGE_NAV_STYLES)
        collector.add(
            "onPageNav",
            IssueKind.INVALID_ENUM_VALUE,
            f"Unknown onPageNav style {value!r}; expected one of: {allowed}.",
        )


def _build_site_config(raw: cabc.Mapping[str, typ.Any], search_key: str) -> SiteConfig:
    """Build a SiteConfig from a declaration that passed every check."""
    search_payload = _present(raw, search_key)
    colors_payload = _present(raw, "colors")
    highlight_payload = _present(raw, "highlight")
    on_page_nav = _present(raw, "onPageNav")
    booleans = {
        key: raw[key] if _present(raw, key) is not None else default
        for key, default in BOOLEAN_DEFAULTS.items()
    }
    extra = {
        key: freeze_value(value)
        for key, value in raw.items()
        if key not in KNOWN_KEYS
    }

    return SiteConfig(
        title=raw["title"],
        url=raw["url"],
        base_url=raw["baseUrl"],
        tagline=_present(raw, "tagline"),
        organization_name=_present(raw, "organizationName"),
        project_name=_present(raw, "projectName"),
        ga_tracking_id=_present(raw, "gaTrackingId"),
        header_links=tuple(
            build_nav_link(entry) for entry in _present(raw, HEADER_LINKS_KEY) or ()
        ),
        users=tuple(_build_user(entry) for entry in _present(raw, "users") or ()),
        search_integration=(
            SearchIntegration(
                api_key=search_payload["apiKey"],
                index_name=search_payload["indexName"],
            )
            if search_payload is not None
            else None
        ),
        header_icon=_present(raw, "headerIcon"),
        footer_icon=_present(raw, "footerIcon"),
        favicon=_present(raw, "favicon"),
        og_image=_present(raw, "ogImage"),
        twitter_image=_present(raw, "twitterImage"),
        colors=(
            ColorsConfig(
                primary_color=colors_payload["primaryColor"],
                secondary_color=colors_payload["secondaryColor"],
            )
            if colors_payload is not None
            else None
        ),
        highlight=(
            HighlightConfig(theme=highlight_payload.get("theme") or "default")
            if highlight_payload is not None
            else None
        ),
        scripts=tuple(_present(raw, "scripts") or ()),
        stylesheets=tuple(_present(raw, "stylesheets") or ()),
        on_page_nav=OnPageNav(on_page_nav) if on_page_nav is not None else None,
        scroll_to_top=booleans["scrollToTop"],
        docs_side_nav_collapsible=booleans["docsSideNavCollapsible"],
        edit_url=_present(raw, "editUrl"),
        disable_header_title=booleans["disableHeaderTitle"],
        wrap_pages_html=booleans["wrapPagesHTML"],
        clean_url=booleans["cleanUrl"],
        extra=extra,
    )


def _build_user(entry: cabc.Mapping[str, typ.Any]) -> UserShowcase:
    return UserShowcase(
        caption=entry["caption"],
        image=entry.get("image"),
        info_link=entry.get("infoLink"),
        pinned=bool(entry.get("pinned", False)),
    )


def normalize(raw: object) -> SiteConfig:
    """Validate ``raw`` and return the configuration or raise on any issue.

    Raises
    ------
    SiteConfigError
        If the declaration is invalid; ``issues`` holds every problem found.
    """
    return validate(raw).unwrap()


__all__ = ["KNOWN_KEYS", "SEARCH_KEY", "normalize", "validate"]
