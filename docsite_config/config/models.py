"""Typed dataclasses describing documentation site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import enum
import types
import typing as typ

from . import helpers


class IssueKind(enum.StrEnum):
    """Machine-readable category attached to each validation issue."""

    MISSING_FIELD = "MissingField"
    TYPE_MISMATCH = "TypeMismatch"
    PATTERN_MISMATCH = "PatternMismatch"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    DUPLICATE_SLOT = "DuplicateSlot"
    AMBIGUOUS_VARIANT = "AmbiguousVariant"


class OnPageNav(enum.StrEnum):
    """Supported on-page navigation styles."""

    SEPARATE = "separate"


@dc.dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single problem found while validating a raw declaration."""

    path: str
    kind: IssueKind
    message: str

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.kind}: {self.message}"


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""

    def __init__(self, issues: typ.Sequence[ValidationIssue]) -> None:
        self.issues = tuple(issues)
        lines = "\n".join(f"  {issue}" for issue in self.issues)
        super().__init__(
            f"Site configuration has {len(self.issues)} problem(s):\n{lines}"
        )


@dc.dataclass(frozen=True, slots=True)
class DocLink:
    """Header link pointing at an internal documentation page."""

    doc: str
    label: str


@dc.dataclass(frozen=True, slots=True)
class ExternalLink:
    """Header link pointing at an external or computed URL."""

    href: str
    label: str


@dc.dataclass(frozen=True, slots=True)
class SearchSlot:
    """Marker for where the search box sits in the header."""

    search: typ.Literal[True] = True


NavLink = DocLink | ExternalLink | SearchSlot


@dc.dataclass(frozen=True, slots=True)
class SearchIntegration:
    """Credentials for the hosted search index."""

    api_key: str
    index_name: str


@dc.dataclass(frozen=True, slots=True)
class ColorsConfig:
    """Primary and secondary theme colors."""

    primary_color: str
    secondary_color: str


@dc.dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Syntax highlighting options passed through to the generator."""

    theme: str = "default"


@dc.dataclass(frozen=True, slots=True)
class UserShowcase:
    """An organization listed on the generated users page."""

    caption: str
    image: str | None = None
    info_link: str | None = None
    pinned: bool = False


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Normalized, immutable site configuration ready for a site build."""

    title: str
    url: str
    base_url: str
    tagline: str | None = None
    organization_name: str | None = None
    project_name: str | None = None
    ga_tracking_id: str | None = None
    header_links: tuple[NavLink, ...] = ()
    users: tuple[UserShowcase, ...] = ()
    search_integration: SearchIntegration | None = None
    header_icon: str | None = None
    footer_icon: str | None = None
    favicon: str | None = None
    og_image: str | None = None
    twitter_image: str | None = None
    colors: ColorsConfig | None = None
    highlight: HighlightConfig | None = None
    scripts: tuple[str, ...] = ()
    stylesheets: tuple[str, ...] = ()
    on_page_nav: OnPageNav | None = None
    scroll_to_top: bool = False
    docs_side_nav_collapsible: bool = False
    edit_url: str | None = None
    disable_header_title: bool = False
    wrap_pages_html: bool = False
    clean_url: bool = True
    extra: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: types.MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.extra, types.MappingProxyType):
            object.__setattr__(self, "extra", helpers.freeze_value(self.extra))

    @property
    def search_enabled(self) -> bool:
        """Return True when a search index has been configured."""
        return self.search_integration is not None

    @property
    def search_slot_index(self) -> int | None:
        """Return the position of the search box in the header, if any."""
        for index, link in enumerate(self.header_links):
            if isinstance(link, SearchSlot):
                return index
        return None

    @property
    def repository_url(self) -> str | None:
        """Return the GitHub repository URL built from org and project names."""
        if not (self.organization_name and self.project_name):
            return None
        return helpers.build_repository_url(
            self.organization_name, self.project_name
        )

    def resolve_url(self, path: str) -> str:
        """Resolve ``path`` against this site's ``base_url``."""
        return helpers.resolve_url(path, self)

    def resolved_scripts(self) -> list[str]:
        """Return script URLs in load order, resolved against ``base_url``."""
        return [self.resolve_url(script) for script in self.scripts]

    def resolved_stylesheets(self) -> list[str]:
        """Return stylesheet URLs in load order, resolved against ``base_url``."""
        return [self.resolve_url(sheet) for sheet in self.stylesheets]

    def edit_url_for(self, doc_id: str) -> str | None:
        """Return the source edit link for ``doc_id`` or None when unset."""
        if not self.edit_url:
            return None
        base = self.edit_url if self.edit_url.endswith("/") else f"{self.edit_url}/"
        return f"{base}{doc_id.lstrip('/')}.md"


@dc.dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of :func:`validate`: a configuration or the issues found."""

    config: SiteConfig | None = None
    issues: tuple[ValidationIssue, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True when validation produced a configuration."""
        return self.config is not None and not self.issues

    def unwrap(self) -> SiteConfig:
        """Return the configuration or raise :class:`SiteConfigError`."""
        if self.config is None or self.issues:
            raise SiteConfigError(self.issues)
        return self.config


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
]
