"""Shared contract and helpers for documentation coverage statistics.

Every coverage node (group, method, type, package, project) derives
from DocStats, which reduces the node's own documentation units and
those of its children into documentable/documented totals.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from doccov.model.structure import MemberInfo, MethodInfo, TypeInfo


class DocCoverageError(Exception):
    """Base class for documentation coverage errors."""


class UnsupportedElementKindError(DocCoverageError):
    """Raised when an element of an unknown kind reaches a predicate."""

    def __init__(self, element: object) -> None:
        self.element = element
        super().__init__(f"Unsupported element kind: {type(element).__name__}")


class SnapshotError(DocCoverageError):
    """Raised when a documentation snapshot cannot be interpreted."""


def is_text_present(text: Optional[str]) -> bool:
    """Check whether a piece of documentation text has any content.

    Args:
        text: Raw text, possibly None.

    Returns:
        True if the text is non-empty after trimming.
    """
    return bool(text and text.strip())


def has_description(comment: Optional[str]) -> bool:
    """Check whether a comment carries descriptive prose.

    Only the text before the first block-tag line counts, so a comment
    made exclusively of tags such as ``@param`` is not a description.

    Args:
        comment: Raw documentation comment, possibly None.

    Returns:
        True if there is non-empty text before the first tag line.
    """
    for line in (comment or "").splitlines():
        stripped = line.strip()
        if stripped.startswith("@"):
            return False
        if stripped:
            return True
    return False


def is_public(element: object) -> bool:
    """Tell whether a declaration is publicly visible.

    Args:
        element: A TypeInfo, MethodInfo or MemberInfo.

    Returns:
        The element's public flag.

    Raises:
        UnsupportedElementKindError: If the element has no visibility.
    """
    if isinstance(element, (TypeInfo, MethodInfo, MemberInfo)):
        return element.is_public
    raise UnsupportedElementKindError(element)


def compute_percentage(documented: int, documentable: int) -> float:
    """Compute the documented share of a node's units.

    Args:
        documented: Number of documented units.
        documentable: Number of units that could be documented.

    Returns:
        The percentage in [0, 100], or 0.0 when nothing is documentable.
    """
    if documentable == 0:
        return 0.0
    return 100.0 * documented / documentable


class DocStats:
    """A node of the coverage tree.

    Subclasses set their own documentation units and their children;
    totals are the generic reduction ``self + sum(children)``.

    Attributes:
        kind: Label of the node kind (e.g. "Method", "Fields").
        name: Name of the documented element, empty for groups.
    """

    kind: str = ""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @property
    def children(self) -> Sequence[DocStats]:
        """Child nodes whose units are added to this node's own."""
        return ()

    @property
    def own_documentable(self) -> int:
        """Units counted at this node rather than by its child nodes."""
        return 0

    @property
    def own_documented(self) -> int:
        """Documented units among ``own_documentable``."""
        return 0

    @property
    def documentable(self) -> int:
        """Units at this node and below."""
        return self.own_documentable + sum(c.documentable for c in self.children)

    @property
    def documented(self) -> int:
        """Documented units at this node and below."""
        return self.own_documented + sum(c.documented for c in self.children)

    @property
    def undocumented(self) -> int:
        """Units at this node and below that still lack documentation."""
        return self.documentable - self.documented

    @property
    def percent(self) -> float:
        """Percentage of documented units, 0 when nothing is documentable."""
        return compute_percentage(self.documented, self.documentable)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this node and its children.
        """
        return {
            "kind": self.kind,
            "name": self.name,
            "documentable": self.documentable,
            "documented": self.documented,
            "undocumented": self.undocumented,
            "percent": round(self.percent, 2),
            "children": [c.to_dict() for c in self.children],
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind!r}, name={self.name!r}, "
            f"documented={self.documented}/{self.documentable})"
        )
