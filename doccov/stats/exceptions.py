"""Coverage of the exceptions a method declares or documents.

Declared exceptions come from the method signature and are fully
qualified; documented exceptions come from ``@throws``/``@exception``
tags whose first word names the exception, usually unqualified. A
declared exception is considered documented when its qualified name
ends with a tag's identifier. This suffix match is a heuristic: two
types sharing a simple name in different packages are not told apart.
"""

from __future__ import annotations

import logging
from typing import Optional

from doccov.model.structure import MethodInfo, TagInfo
from doccov.stats.base import DocStats

logger = logging.getLogger(__name__)

EXCEPTION_TAGS = ("@throws", "@exception")


def tag_identifier(tag: TagInfo) -> Optional[str]:
    """Extract the exception name a tag refers to.

    Args:
        tag: A ``@throws`` or ``@exception`` tag.

    Returns:
        The first word of the tag text, or None when the text is empty.
    """
    words = tag.text.split(None, 1)
    return words[0] if words else None


def _matches(declared: str, identifier: Optional[str]) -> bool:
    return bool(identifier) and declared.endswith(identifier)


class ExceptionStats(DocStats):
    """Reconciles declared exceptions against documented exception tags.

    Every declared exception and every tag falls into exactly one of
    three buckets. Declared exceptions with a matching tag are
    ``declared_documented``; the rest are ``declared_only``. Tags that
    match no declared exception, including tags without an identifier,
    are ``documented_only``; they still count as documentation, since
    unchecked exceptions need not be declared.

    Attributes:
        declared_documented: Declared exception names with a matching tag.
        declared_only: Declared exception names with no matching tag.
        documented_only: Tag identifiers (or raw tag text) that match no
            declared exception.
    """

    kind = "Exceptions"

    def __init__(self, method: MethodInfo) -> None:
        super().__init__()
        tags = method.tags_named(*EXCEPTION_TAGS)
        identifiers = [tag_identifier(tag) for tag in tags]

        declared_documented = []
        declared_only = []
        for declared in method.thrown_exceptions:
            if any(_matches(declared, ident) for ident in identifiers):
                declared_documented.append(declared)
            else:
                declared_only.append(declared)

        documented_only = []
        for tag, ident in zip(tags, identifiers):
            if ident is None:
                logger.debug("%s has an exception tag with no identifier", method.name)
                documented_only.append(tag.text)
            elif not any(_matches(d, ident) for d in method.thrown_exceptions):
                documented_only.append(ident)

        self.declared_documented = tuple(declared_documented)
        self.declared_only = tuple(declared_only)
        self.documented_only = tuple(documented_only)

    @property
    def own_documentable(self) -> int:
        return (
            len(self.declared_only)
            + len(self.declared_documented)
            + len(self.documented_only)
        )

    @property
    def own_documented(self) -> int:
        return len(self.declared_documented) + len(self.documented_only)
