"""Coverage of flat groups of sibling declarations.

A group (fields, enum constants, annotation elements, parameters) has
no documentation of its own; only its members do.
"""

from __future__ import annotations

import logging
from typing import Iterable

from doccov.model.structure import MemberInfo, MethodInfo
from doccov.stats.base import DocStats, is_public, is_text_present
from doccov.utils.config import CoverageConfig

logger = logging.getLogger(__name__)

FIELDS = "Fields"
ENUM_CONSTANTS = "Enum Consts"
ANNOTATIONS = "Annotations"
PARAMS = "Params"


class GroupStats(DocStats):
    """Documentable and documented counts of a group of leaf declarations.

    Use the ``from_members`` and ``from_parameters`` constructors rather
    than building counts by hand.
    """

    def __init__(self, kind: str, documentable: int, documented: int) -> None:
        super().__init__()
        self.kind = kind
        self._documentable = documentable
        self._documented = documented

    @property
    def own_documentable(self) -> int:
        return self._documentable

    @property
    def own_documented(self) -> int:
        return self._documented

    @classmethod
    def from_members(
        cls, kind: str, members: Iterable[MemberInfo], config: CoverageConfig
    ) -> GroupStats:
        """Count a group of fields, enum constants or annotation elements.

        Members without a source position are synthetic and not counted.
        With ``public_only`` set, non-public members are left out too.

        Args:
            kind: Group label, e.g. "Fields".
            members: Declarations of the group.
            config: Coverage options.

        Returns:
            A new GroupStats instance.
        """
        counted = [m for m in members if m.has_source_position]
        if config.public_only:
            counted = [m for m in counted if is_public(m)]

        documented = sum(1 for m in counted if is_text_present(m.comment))
        return cls(kind, len(counted), documented)

    @classmethod
    def from_parameters(cls, method: MethodInfo) -> GroupStats:
        """Count the parameters of a method against its ``@param`` tags.

        Every formal parameter is documentable regardless of visibility;
        surplus tags never make the documented count exceed it.

        Args:
            method: The method or constructor.

        Returns:
            A new GroupStats instance of kind "Params".
        """
        declared = len(method.parameters)
        tagged = sum(
            1 for tag in method.tags_named("@param") if is_text_present(tag.text)
        )
        if tagged > declared:
            logger.debug(
                "%s has %d @param tags for %d parameters", method.name, tagged, declared
            )
        return cls(PARAMS, declared, min(tagged, declared))
