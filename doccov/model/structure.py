"""Data models for the documentation snapshot of a codebase.

Defines immutable dataclasses for packages, types, members, methods,
parameters and documentation tags, plus the DocModel container that
answers structural queries (type lookup, superclass, interfaces).
These models form the read-only input of the coverage engine.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

_TAG_LINE = re.compile(r"^(@\w+)\s*(.*)$")


class TypeKind(str, Enum):
    """Kinds of type declarations."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION = "annotation"


class MemberKind(str, Enum):
    """Kinds of leaf member declarations."""

    FIELD = "field"
    ENUM_CONSTANT = "enum_constant"
    ANNOTATION_ELEMENT = "annotation_element"


class MethodKind(str, Enum):
    """Kinds of executable members."""

    METHOD = "method"
    CONSTRUCTOR = "constructor"


def extract_tags(comment: Optional[str]) -> tuple[TagInfo, ...]:
    """Extract block tags from a raw documentation comment.

    A block tag starts on a line whose trimmed text begins with ``@``.
    Following lines that do not start a new tag are appended to the
    current tag's text.

    Args:
        comment: Raw comment text, possibly None.

    Returns:
        Tuple of TagInfo objects in comment order.
    """
    tags: list[TagInfo] = []
    name: Optional[str] = None
    parts: list[str] = []

    for line in (comment or "").splitlines():
        stripped = line.strip()
        match = _TAG_LINE.match(stripped)
        if match:
            if name is not None:
                tags.append(TagInfo(name=name, text=" ".join(parts).strip()))
            name = match.group(1)
            parts = [match.group(2)]
        elif name is not None and stripped:
            parts.append(stripped)

    if name is not None:
        tags.append(TagInfo(name=name, text=" ".join(parts).strip()))
    return tuple(tags)


@dataclass(frozen=True)
class TagInfo:
    """A documentation block tag such as ``@param`` or ``@throws``.

    Attributes:
        name: Tag name including the leading ``@``.
        text: Free text following the tag name.
    """

    name: str
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TagInfo:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with tag fields.

        Returns:
            A new TagInfo instance.
        """
        name = data["name"]
        if not name.startswith("@"):
            name = f"@{name}"
        return cls(name=name, text=data.get("text") or "")


@dataclass(frozen=True)
class ParameterInfo:
    """A formal parameter of a method or constructor.

    Attributes:
        name: Parameter name.
        type_name: Declared type of the parameter.
    """

    name: str
    type_name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParameterInfo:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with parameter fields.

        Returns:
            A new ParameterInfo instance.
        """
        return cls(name=data["name"], type_name=data.get("type", ""))


@dataclass(frozen=True)
class MemberInfo:
    """A field, enum constant or annotation element declaration.

    Attributes:
        name: Member name.
        kind: Kind of member.
        comment: Raw documentation comment.
        is_public: Whether the member is publicly visible.
        has_source_position: False for synthetic members that do not
            appear in the source code.
    """

    name: str
    kind: MemberKind = MemberKind.FIELD
    comment: str = ""
    is_public: bool = True
    has_source_position: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any], kind: MemberKind) -> MemberInfo:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with member fields.
            kind: Kind of member, given by the list it was read from.

        Returns:
            A new MemberInfo instance.
        """
        return cls(
            name=data["name"],
            kind=kind,
            comment=data.get("comment") or "",
            is_public=data.get("public", True),
            has_source_position=data.get("source_position", True),
        )


@dataclass(frozen=True)
class MethodInfo:
    """A method or constructor declaration.

    Attributes:
        name: Method name.
        kind: Method or constructor.
        comment: Raw documentation comment.
        is_public: Whether the method is publicly visible.
        has_source_position: False for compiler-generated methods.
        parameters: Formal parameters in declaration order.
        return_type: Declared return type; None or "void" for no value.
        thrown_exceptions: Qualified names of declared exceptions.
        tags: Documentation block tags.
    """

    name: str
    kind: MethodKind = MethodKind.METHOD
    comment: str = ""
    is_public: bool = True
    has_source_position: bool = True
    parameters: tuple[ParameterInfo, ...] = ()
    return_type: Optional[str] = None
    thrown_exceptions: tuple[str, ...] = ()
    tags: tuple[TagInfo, ...] = ()

    @property
    def is_constructor(self) -> bool:
        return self.kind == MethodKind.CONSTRUCTOR

    @property
    def is_void(self) -> bool:
        """Whether the method has no return value to document."""
        return self.is_constructor or self.return_type in (None, "", "void")

    @property
    def signature(self) -> tuple[str, tuple[str, ...]]:
        """Name and parameter types, used to match overridden methods."""
        return self.name, tuple(p.type_name for p in self.parameters)

    @property
    def display_signature(self) -> str:
        """Signature shown in reports, such as ``scale(double, boolean)``."""
        name, param_types = self.signature
        return f"{name}({', '.join(param_types)})"

    def tags_named(self, *names: str) -> list[TagInfo]:
        """Get the tags whose name is one of the given names.

        Args:
            names: Tag names including the leading ``@``.

        Returns:
            Matching tags in comment order.
        """
        return [tag for tag in self.tags if tag.name in names]

    @classmethod
    def from_dict(cls, data: dict[str, Any], kind: MethodKind) -> MethodInfo:
        """Deserialize from a dictionary.

        Tags are read from the ``tags`` key when present, otherwise they
        are extracted from the comment's block-tag lines.

        Args:
            data: Dictionary with method fields.
            kind: Method or constructor, given by the list it was read from.

        Returns:
            A new MethodInfo instance.
        """
        comment = data.get("comment") or ""
        if "tags" in data:
            tags = tuple(TagInfo.from_dict(t) for t in data["tags"])
        else:
            tags = extract_tags(comment)

        return cls(
            name=data["name"],
            kind=kind,
            comment=comment,
            is_public=data.get("public", True),
            has_source_position=data.get("source_position", True),
            parameters=tuple(
                ParameterInfo.from_dict(p) for p in data.get("parameters", [])
            ),
            return_type=data.get("return_type"),
            thrown_exceptions=tuple(data.get("throws", [])),
            tags=tags,
        )


@dataclass(frozen=True)
class TypeInfo:
    """A class, interface, enum or annotation type declaration.

    Attributes:
        name: Simple type name.
        package: Name of the containing package.
        kind: Kind of type.
        comment: Raw documentation comment.
        is_public: Whether the type is publicly visible.
        superclass: Qualified name of the superclass, if any.
        interfaces: Qualified names of directly implemented interfaces.
        fields: Declared fields.
        enum_constants: Declared enum constants.
        annotation_elements: Declared annotation elements.
        constructors: Declared constructors.
        methods: Declared methods.
    """

    name: str
    package: str = ""
    kind: TypeKind = TypeKind.CLASS
    comment: str = ""
    is_public: bool = True
    superclass: Optional[str] = None
    interfaces: tuple[str, ...] = ()
    fields: tuple[MemberInfo, ...] = ()
    enum_constants: tuple[MemberInfo, ...] = ()
    annotation_elements: tuple[MemberInfo, ...] = ()
    constructors: tuple[MethodInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name

    @property
    def is_enum(self) -> bool:
        return self.kind == TypeKind.ENUM

    @property
    def is_annotation(self) -> bool:
        return self.kind == TypeKind.ANNOTATION

    @classmethod
    def from_dict(cls, data: dict[str, Any], package: str = "") -> TypeInfo:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with type fields.
            package: Name of the enclosing package, used when the
                dictionary does not name one.

        Returns:
            A new TypeInfo instance.
        """

        def members(key: str, kind: MemberKind) -> tuple[MemberInfo, ...]:
            return tuple(MemberInfo.from_dict(m, kind) for m in data.get(key, []))

        def methods(key: str, kind: MethodKind) -> tuple[MethodInfo, ...]:
            return tuple(MethodInfo.from_dict(m, kind) for m in data.get(key, []))

        return cls(
            name=data["name"],
            package=data.get("package", package),
            kind=TypeKind(data.get("kind", "class")),
            comment=data.get("comment") or "",
            is_public=data.get("public", True),
            superclass=data.get("superclass"),
            interfaces=tuple(data.get("interfaces", [])),
            fields=members("fields", MemberKind.FIELD),
            enum_constants=members("enum_constants", MemberKind.ENUM_CONSTANT),
            annotation_elements=members(
                "annotation_elements", MemberKind.ANNOTATION_ELEMENT
            ),
            constructors=methods("constructors", MethodKind.CONSTRUCTOR),
            methods=methods("methods", MethodKind.METHOD),
        )


@dataclass(frozen=True)
class PackageInfo:
    """A package and the types it contains.

    Attributes:
        name: Qualified package name.
        comment: Raw package documentation comment.
        types: Types declared in the package.
    """

    name: str
    comment: str = ""
    types: tuple[TypeInfo, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PackageInfo:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with package fields.

        Returns:
            A new PackageInfo instance.
        """
        name = data["name"]
        return cls(
            name=name,
            comment=data.get("comment") or "",
            types=tuple(
                TypeInfo.from_dict(t, package=name) for t in data.get("types", [])
            ),
        )


@dataclass(frozen=True)
class DocModel:
    """Read-only documentation model of a whole codebase.

    Answers the structural queries the coverage engine needs, in
    particular type lookup by qualified name for walking the
    inheritance graph.

    Attributes:
        packages: Packages of the snapshot in declaration order.
    """

    packages: tuple[PackageInfo, ...] = ()
    _types: dict[str, TypeInfo] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for package in self.packages:
            for type_info in package.types:
                self._types[type_info.qualified_name] = type_info

    def list_packages(self) -> tuple[PackageInfo, ...]:
        return self.packages

    def list_types(self, package: PackageInfo) -> tuple[TypeInfo, ...]:
        """List the types declared in a package, in declaration order."""
        return package.types

    def iter_types(self) -> Iterator[TypeInfo]:
        """Iterate over every type of every package."""
        for package in self.packages:
            yield from package.types

    def find_type(self, qualified_name: Optional[str]) -> Optional[TypeInfo]:
        """Look up a type by its qualified name.

        Args:
            qualified_name: Qualified type name, possibly None.

        Returns:
            The TypeInfo, or None when the type is not in the snapshot.
        """
        if not qualified_name:
            return None
        return self._types.get(qualified_name)

    def superclass(self, type_info: TypeInfo) -> Optional[TypeInfo]:
        return self.find_type(type_info.superclass)

    def implemented_interfaces(self, type_info: TypeInfo) -> list[TypeInfo]:
        """Get the directly implemented interfaces present in the snapshot.

        Args:
            type_info: The type whose interfaces are requested.

        Returns:
            Interfaces found in the snapshot; unknown names are skipped.
        """
        found = (self.find_type(name) for name in type_info.interfaces)
        return [t for t in found if t is not None]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocModel:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with a ``packages`` list.

        Returns:
            A new DocModel instance.
        """
        return cls(
            packages=tuple(PackageInfo.from_dict(p) for p in data.get("packages", []))
        )
