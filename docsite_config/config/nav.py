"""Header navigation link parsing for the site configuration.

A header entry is exactly one of three shapes: ``{doc, label}`` for an
internal documentation page, ``{href, label}`` for any other URL, and
``{search: true}`` marking where the search box is rendered. Entries are
classified by which of the discriminating keys they carry; carrying none or
several of them is reported against the entry's index.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .helpers import is_identifier
from .issues import IssueCollector, item_path
from .models import DocLink, ExternalLink, IssueKind, NavLink, SearchSlot

HEADER_LINKS_KEY = "headerLinks"
VARIANT_KEYS = ("doc", "href", "search")
TEXT_KEYS = ("doc", "href", "label")
ALLOWED_KEYS: dict[str, frozenset[str]] = {
    "doc": frozenset(("doc", "label")),
    "href": frozenset(("href", "label")),
    "search": frozenset(("search",)),
}


def variant_keys(entry: cabc.Mapping[str, typ.Any]) -> list[str]:
    """Return the discriminating keys present on ``entry`` in canonical order."""
    return [key for key in VARIANT_KEYS if key in entry]


def is_search_slot(entry: object) -> bool:
    """Return True when ``entry`` is a ``{search: true}`` marker."""
    match entry:
        case {"search": True}:
            return True
        case _:
            return False


def check_entry_types(index: int, entry: object, collector: IssueCollector) -> None:
    """Report header entries and fields whose types do not match the schema."""
    path = item_path(HEADER_LINKS_KEY, index)
    if not isinstance(entry, cabc.Mapping):
        collector.wrong_type(path, "a mapping", entry)
        return
    for key in TEXT_KEYS:
        value = entry.get(key)
        if value is not None and not isinstance(value, str):
            collector.wrong_type(
                item_path(HEADER_LINKS_KEY, index, key), "text", value
            )
    search = entry.get("search")
    if search is not None and not isinstance(search, bool):
        collector.wrong_type(
            item_path(HEADER_LINKS_KEY, index, "search"), "a boolean", search
        )


def check_search_slots(
    entries: cabc.Sequence[object], collector: IssueCollector
) -> None:
    """Report every search marker after the first one."""
    slots = [index for index, entry in enumerate(entries) if is_search_slot(entry)]
    for index in slots[1:]:
        collector.add(
            item_path(HEADER_LINKS_KEY, index),
            IssueKind.DUPLICATE_SLOT,
            f"Only one search slot is allowed in '{HEADER_LINKS_KEY}'; "
            f"the first is at index {slots[0]}.",
        )


def check_variant(index: int, entry: object, collector: IssueCollector) -> None:
    """Report entries that do not match exactly one link variant."""
    if not isinstance(entry, cabc.Mapping):
        return
    path = item_path(HEADER_LINKS_KEY, index)
    present = variant_keys(entry)
    match present:
        case []:
            collector.add(
                path,
                IssueKind.TYPE_MISMATCH,
                f"'{path}' matches no link variant; expected one of "
                "'doc', 'href', or 'search'.",
            )
        case ["search"]:
            _check_search_flag(index, entry["search"], collector)
            _check_unknown_keys(index, entry, "search", collector)
        case [key]:
            _check_link_fields(index, entry, key, collector)
            _check_unknown_keys(index, entry, key, collector)
        case _:
            fields = ", ".join(f"'{key}'" for key in present)
            collector.add(
                path,
                IssueKind.AMBIGUOUS_VARIANT,
                f"'{path}' mixes fields of several link variants ({fields}).",
            )


def _check_search_flag(index: int, flag: object, collector: IssueCollector) -> None:
    """Report search markers whose flag is absent or not ``true``."""
    path = item_path(HEADER_LINKS_KEY, index, "search")
    if flag is None:
        collector.missing(path)
    elif flag is False:
        collector.mismatch(path, "A search slot must set 'search: true'.")


def _check_unknown_keys(
    index: int,
    entry: cabc.Mapping[str, typ.Any],
    variant: str,
    collector: IssueCollector,
) -> None:
    """Report keys that the matched link variant does not define."""
    for key in entry:
        if key not in ALLOWED_KEYS[variant]:
            path = item_path(HEADER_LINKS_KEY, index, str(key))
            collector.add(
                path,
                IssueKind.TYPE_MISMATCH,
                f"'{path}' is not a field of a '{variant}' link.",
            )


def _check_link_fields(
    index: int,
    entry: cabc.Mapping[str, typ.Any],
    key: str,
    collector: IssueCollector,
) -> None:
    """Validate the target and label of a doc or href link."""
    target = entry.get(key)
    target_path = item_path(HEADER_LINKS_KEY, index, key)
    if isinstance(target, str):
        if not target.strip():
            collector.mismatch(target_path, f"'{target_path}' must not be empty.")
        elif key == "doc" and not is_identifier(target):
            collector.mismatch(
                target_path,
                f"'{target_path}' must be a document id without whitespace, "
                f"got {target!r}.",
            )
    elif target is None:
        collector.missing(target_path)

    label = entry.get("label")
    label_path = item_path(HEADER_LINKS_KEY, index, "label")
    if label is None:
        collector.missing(label_path)
    elif isinstance(label, str) and not label.strip():
        collector.mismatch(label_path, f"'{label_path}' must not be empty.")


def build_nav_link(entry: cabc.Mapping[str, typ.Any]) -> NavLink:
    """Build a typed link from an entry that has already been validated."""
    match entry:
        case {"search": True}:
            return SearchSlot()
        case {"doc": str() as doc, "label": str() as label}:
            return DocLink(doc=doc, label=label)
        case {"href": str() as href, "label": str() as label}:
            return ExternalLink(href=href, label=label)
        case _:  # pragma: no cover - rejected during validation
            msg = f"Unrecognised header link: {entry!r}"
            raise TypeError(msg)


def nav_link_to_raw(link: NavLink) -> dict[str, typ.Any]:
    """Return the declaration mapping for a typed link."""
    match link:
        case SearchSlot():
            return {"search": True}
        case DocLink(doc=doc, label=label):
            return {"doc": doc, "label": label}
        case ExternalLink(href=href, label=label):
            return {"href": href, "label": label}
        case _:  # pragma: no cover - exhaustive over NavLink
            msg = f"Unsupported header link type: {type(link).__name__}"
            raise TypeError(msg)


__all__ = [
    "HEADER_LINKS_KEY",
    "VARIANT_KEYS",
    "build_nav_link",
    "check_entry_types",
    "check_search_slots",
    "check_variant",
    "is_search_slot",
    "nav_link_to_raw",
    "variant_keys",
]
