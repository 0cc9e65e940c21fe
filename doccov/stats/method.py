"""Coverage of methods and constructors.

A method counts its own description, its return value (unless void or
a constructor), its parameters and its exceptions. An undocumented
method that overrides a fully documented ancestor method inherits that
documentation and is reported as fully documented.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Optional, Sequence

from doccov.model.structure import DocModel, MethodInfo, TypeInfo
from doccov.stats.base import DocStats, has_description, is_text_present
from doccov.stats.exceptions import ExceptionStats
from doccov.stats.group import GroupStats

logger = logging.getLogger(__name__)

MethodKey = tuple[str, str, tuple[str, ...]]


def _method_key(owner: TypeInfo, method: MethodInfo) -> MethodKey:
    name, param_types = method.signature
    return owner.qualified_name, name, param_types


class OverrideResolver:
    """Decides whether methods inherit documentation from overridden ones.

    Results are memoized per method identity (declaring type, name and
    parameter types) for the whole run. Ancestors are visited at most
    once per resolution, so diamond-shaped interface hierarchies and
    cyclic inheritance in malformed snapshots are handled. The memo
    tables are filled under a re-entrant lock, which makes a single
    resolver safe to share between threads.
    """

    def __init__(self, model: DocModel) -> None:
        self.model = model
        self._fully_documented: dict[MethodKey, bool] = {}
        self._inherits: dict[MethodKey, bool] = {}
        self._in_progress: set[MethodKey] = set()
        self._lock = threading.RLock()

    def ancestors(self, type_info: TypeInfo) -> list[TypeInfo]:
        """List every supertype reachable from a type, nearest first.

        Walks the superclass chain and all superinterfaces transitively.
        Supertypes missing from the snapshot are skipped.

        Args:
            type_info: The type to start from.

        Returns:
            Distinct ancestor types in breadth-first order.
        """
        visited = {type_info.qualified_name}
        found: list[TypeInfo] = []
        queue = deque([type_info])

        while queue:
            current = queue.popleft()
            parents = [self.model.superclass(current)]
            parents.extend(self.model.implemented_interfaces(current))
            for parent in parents:
                if parent is None or parent.qualified_name in visited:
                    continue
                visited.add(parent.qualified_name)
                found.append(parent)
                queue.append(parent)
        return found

    def overridden_methods(
        self, owner: TypeInfo, method: MethodInfo
    ) -> list[tuple[TypeInfo, MethodInfo]]:
        """Find the ancestor methods a method overrides.

        Args:
            owner: Type declaring the method.
            method: The overriding method.

        Returns:
            (declaring type, method) pairs with the same signature.
        """
        if method.is_constructor:
            return []
        return [
            (ancestor, candidate)
            for ancestor in self.ancestors(owner)
            for candidate in ancestor.methods
            if candidate.signature == method.signature
        ]

    def inherits_documentation(self, owner: TypeInfo, method: MethodInfo) -> bool:
        """Tell whether a method overrides a fully documented ancestor method.

        Args:
            owner: Type declaring the method.
            method: The method to check.

        Returns:
            True if at least one overridden method is fully documented.
        """
        key = _method_key(owner, method)
        with self._lock:
            if key not in self._inherits:
                self._inherits[key] = any(
                    self.is_fully_documented(ancestor, candidate)
                    for ancestor, candidate in self.overridden_methods(owner, method)
                )
            return self._inherits[key]

    def is_fully_documented(self, owner: TypeInfo, method: MethodInfo) -> bool:
        """Tell whether a method has all its units documented.

        Inherited documentation counts, so the check recurses up the
        hierarchy. A method reached again while its own resolution is
        still running is treated as not fully documented.

        Args:
            owner: Type declaring the method.
            method: The method to check.

        Returns:
            True if documented equals documentable for the method.
        """
        key = _method_key(owner, method)
        with self._lock:
            if key in self._fully_documented:
                return self._fully_documented[key]
            if key in self._in_progress:
                logger.debug(
                    "Inheritance cycle reached %s.%s", owner.qualified_name, method.name
                )
                return False

            self._in_progress.add(key)
            try:
                stats = MethodStats(method, owner, self)
                result = stats.documented == stats.documentable
            finally:
                self._in_progress.discard(key)
            self._fully_documented[key] = result
            return result


class MethodStats(DocStats):
    """Coverage of a single method or constructor.

    Attributes:
        method: The method declaration.
        owner: The type declaring the method.
        params: Coverage of the formal parameters.
        exceptions: Coverage of declared and documented exceptions.
    """

    def __init__(
        self,
        method: MethodInfo,
        owner: TypeInfo,
        resolver: OverrideResolver,
    ) -> None:
        super().__init__(method.name)
        self.method = method
        self.owner = owner
        self.kind = "Constructor" if method.is_constructor else "Method"
        self.params = GroupStats.from_parameters(method)
        self.exceptions = ExceptionStats(method)
        self._resolver = resolver
        self._inherited: Optional[bool] = None

    @property
    def children(self) -> Sequence[DocStats]:
        return (self.params, self.exceptions)

    @property
    def is_documented(self) -> bool:
        return has_description(self.method.comment)

    @property
    def is_void_or_constructor(self) -> bool:
        return self.method.is_void

    @property
    def return_documented(self) -> bool:
        tags = self.method.tags_named("@return")
        return any(is_text_present(tag.text) for tag in tags)

    @property
    def own_documentable(self) -> int:
        return 1 + (0 if self.is_void_or_constructor else 1)

    @property
    def own_documented(self) -> int:
        documented = int(self.is_documented)
        if not self.is_void_or_constructor and self.return_documented:
            documented += 1
        return documented

    @property
    def inherited(self) -> bool:
        """Whether the documented count comes from an overridden method.

        Credit applies only when the method documents nothing itself.
        """
        if self._inherited is None:
            self._inherited = (
                super().documented == 0
                and self._resolver.inherits_documentation(self.owner, self.method)
            )
        return self._inherited

    @property
    def documented(self) -> int:
        if self.inherited:
            return self.documentable
        return super().documented

    def to_dict(self) -> dict:
        """Serialize to a dictionary, flagging inherited documentation.

        Returns:
            Dictionary representation of this method.
        """
        data = super().to_dict()
        data["inherited"] = self.inherited
        return data
