"""Coverage of a single type: class, interface, enum or annotation type."""

from __future__ import annotations

import logging
from typing import Sequence

from doccov.model.structure import MethodInfo, TypeInfo, TypeKind
from doccov.stats.base import DocStats, has_description, is_public
from doccov.stats.group import ANNOTATIONS, ENUM_CONSTANTS, FIELDS, GroupStats
from doccov.stats.method import MethodStats, OverrideResolver
from doccov.utils.config import CoverageConfig

logger = logging.getLogger(__name__)

ENUM_BUILTIN_METHODS = frozenset({"values", "valueOf"})

_KIND_LABELS = {
    TypeKind.CLASS: "Class",
    TypeKind.INTERFACE: "Interface",
    TypeKind.ENUM: "Enum",
    TypeKind.ANNOTATION: "Annotation",
}


class TypeStats(DocStats):
    """Coverage of a type, its member groups and its methods.

    Attributes:
        type_info: The type declaration.
        fields: Coverage of declared fields.
        enum_constants: Coverage of enum constants (empty unless an enum).
        annotations: Coverage of annotation elements (empty unless an
            annotation type).
        constructors: Coverage of each counted constructor.
        methods: Coverage of each counted method.
    """

    def __init__(
        self,
        type_info: TypeInfo,
        config: CoverageConfig,
        resolver: OverrideResolver,
    ) -> None:
        super().__init__(type_info.name)
        self.type_info = type_info
        self.kind = _KIND_LABELS[type_info.kind]

        self.fields = GroupStats.from_members(FIELDS, type_info.fields, config)
        self.enum_constants = GroupStats.from_members(
            ENUM_CONSTANTS,
            type_info.enum_constants if type_info.is_enum else (),
            config,
        )
        self.annotations = GroupStats.from_members(
            ANNOTATIONS,
            type_info.annotation_elements if type_info.is_annotation else (),
            config,
        )
        self.constructors = [
            MethodStats(ctor, type_info, resolver)
            for ctor in type_info.constructors
            if self._is_counted(ctor, config)
        ]
        self.methods = [
            MethodStats(method, type_info, resolver)
            for method in type_info.methods
            if self._is_counted(method, config) and not self._is_enum_builtin(method)
        ]

        logger.debug(
            "%s %s: %d constructors, %d methods",
            self.kind,
            self.qualified_name,
            len(self.constructors),
            len(self.methods),
        )

    def _is_counted(self, method: MethodInfo, config: CoverageConfig) -> bool:
        if not method.has_source_position:
            return False
        return is_public(method) or not config.public_only

    def _is_enum_builtin(self, method: MethodInfo) -> bool:
        return self.type_info.is_enum and method.name in ENUM_BUILTIN_METHODS

    @property
    def qualified_name(self) -> str:
        return self.type_info.qualified_name

    @property
    def package_name(self) -> str:
        return self.type_info.package

    @property
    def is_interface(self) -> bool:
        return self.type_info.kind == TypeKind.INTERFACE

    @property
    def is_documented(self) -> bool:
        return has_description(self.type_info.comment)

    @property
    def children(self) -> Sequence[DocStats]:
        return (
            self.fields,
            self.enum_constants,
            self.annotations,
            *self.constructors,
            *self.methods,
        )

    @property
    def own_documentable(self) -> int:
        return 1

    @property
    def own_documented(self) -> int:
        return int(self.is_documented)

    def to_dict(self) -> dict:
        """Serialize to a dictionary, including the package name.

        Returns:
            Dictionary representation of this type.
        """
        data = super().to_dict()
        data["package"] = self.package_name
        return data
