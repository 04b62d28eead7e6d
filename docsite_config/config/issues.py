"""Collect validation issues while walking a raw site declaration."""

from __future__ import annotations

from .models import IssueKind, ValidationIssue


def item_path(key: str, index: int, field: str | None = None) -> str:
    """Return the dotted path for a sequence item, e.g. ``headerLinks[3].label``."""
    path = f"{key}[{index}]"
    return f"{path}.{field}" if field else path


class IssueCollector:
    """Accumulate every problem found instead of stopping at the first."""

    def __init__(self) -> None:
        self._issues: list[ValidationIssue] = []

    def __len__(self) -> int:
        return len(self._issues)

    def __bool__(self) -> bool:
        return bool(self._issues)

    def add(self, path: str, kind: IssueKind, message: str) -> None:
        """Record an issue found at ``path``."""
        self._issues.append(ValidationIssue(path=path, kind=kind, message=message))

    def missing(self, path: str) -> None:
        """Record that a required value is absent."""
        self.add(path, IssueKind.MISSING_FIELD, f"'{path}' is required.")

    def wrong_type(self, path: str, expected: str, value: object) -> None:
        """Record a value whose type does not match the schema."""
        actual = type(value).__name__
        subject = f"'{path}'" if path else "The configuration"
        self.add(
            path,
            IssueKind.TYPE_MISMATCH,
            f"{subject} must be {expected}, got {actual}.",
        )

    def mismatch(self, path: str, message: str) -> None:
        """Record a value of the right type but the wrong shape."""
        self.add(path, IssueKind.PATTERN_MISMATCH, message)

    def freeze(self) -> tuple[ValidationIssue, ...]:
        """Return the collected issues in discovery order."""
        return tuple(self._issues)


__all__ = ["IssueCollector", "item_path"]
