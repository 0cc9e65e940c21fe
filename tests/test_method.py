"""Tests for method coverage and override-inheritance credit."""

import threading
from typing import Optional

import pytest

from doccov.model.structure import (
    DocModel,
    MethodInfo,
    MethodKind,
    PackageInfo,
    ParameterInfo,
    TagInfo,
    TypeInfo,
    TypeKind,
)
from doccov.stats.method import MethodStats, OverrideResolver

FULL_DOC = "Greets someone.\n@param name who to greet\n@return the greeting"


def _greet(comment: str = "", tags: tuple = ()) -> MethodInfo:
    return MethodInfo(
        name="greet",
        comment=comment,
        parameters=(ParameterInfo("name", "String"),),
        return_type="String",
        tags=tags,
    )


def _documented_greet() -> MethodInfo:
    return _greet(
        FULL_DOC,
        (TagInfo("@param", "name who to greet"), TagInfo("@return", "the greeting")),
    )


def _class(name: str, **kwargs) -> TypeInfo:
    return TypeInfo(name=name, package="p", **kwargs)


def _interface(name: str, **kwargs) -> TypeInfo:
    return TypeInfo(name=name, package="p", kind=TypeKind.INTERFACE, **kwargs)


def _model(*types: TypeInfo) -> DocModel:
    return DocModel(packages=(PackageInfo(name="p", types=types),))


def _stats(method: MethodInfo, owner: Optional[TypeInfo] = None) -> MethodStats:
    owner = owner or TypeInfo(name="T", package="p")
    return MethodStats(method, owner, OverrideResolver(_model(owner)))


class TestMethodCounts:
    """Tests for the units of a single method."""

    def test_undocumented_method(self) -> None:
        owner = TypeInfo(name="T", package="p")
        stats = _stats(_greet(), owner)
        assert stats.kind == "Method"
        assert stats.name == "greet"
        # self + return + one param
        assert stats.documentable == 3
        assert stats.documented == 0

    def test_fully_documented_method(self) -> None:
        owner = TypeInfo(name="T", package="p")
        stats = _stats(_documented_greet(), owner)
        assert stats.documentable == 3
        assert stats.documented == 3
        assert stats.percent == 100.0

    def test_void_method_has_no_return_unit(self) -> None:
        method = MethodInfo(name="run", comment="Runs.", return_type="void")
        stats = _stats(method)
        assert stats.documentable == 1
        assert stats.documented == 1

    def test_return_tag_ignored_for_void(self) -> None:
        method = MethodInfo(name="run", tags=(TagInfo("@return", "nothing"),))
        stats = _stats(method)
        assert stats.documentable == 1
        assert stats.documented == 0

    def test_empty_return_tag(self) -> None:
        method = MethodInfo(
            name="size", return_type="int", tags=(TagInfo("@return", " "),)
        )
        stats = _stats(method)
        assert stats.return_documented is False

    def test_tags_only_comment_is_not_self_documented(self) -> None:
        method = MethodInfo(
            name="size",
            comment="@return the size",
            return_type="int",
            tags=(TagInfo("@return", "the size"),),
        )
        stats = _stats(method)
        assert stats.is_documented is False
        assert stats.documentable == 2
        assert stats.documented == 1

    def test_constructor(self) -> None:
        ctor = MethodInfo(name="T", kind=MethodKind.CONSTRUCTOR)
        stats = _stats(ctor)
        assert stats.kind == "Constructor"
        assert stats.documentable == 1
        assert stats.documented == 0

    def test_exceptions_contribute(self) -> None:
        method = MethodInfo(
            name="load",
            comment="Loads.",
            thrown_exceptions=(
                "java.io.IOException",
                "java.lang.IllegalArgumentException",
            ),
            tags=(TagInfo("@throws", "IOException on failure"),),
        )
        stats = _stats(method)
        assert stats.exceptions.documentable == 2
        assert stats.exceptions.documented == 1
        assert stats.documentable == 3
        assert stats.documented == 2

    def test_children_sum_with_own_units(self) -> None:
        stats = _stats(_documented_greet())
        assert stats.children == (stats.params, stats.exceptions)
        assert stats.documentable == stats.own_documentable + sum(
            c.documentable for c in stats.children
        )
        assert stats.documented == stats.own_documented + sum(
            c.documented for c in stats.children
        )


class TestOverrideCredit:
    """Tests for documentation inherited from overridden methods."""

    def test_credit_from_fully_documented_interface(self) -> None:
        iface = _interface("Greeter", methods=(_documented_greet(),))
        impl = _class("Impl", interfaces=("p.Greeter",), methods=(_greet(),))
        resolver = OverrideResolver(_model(iface, impl))

        stats = MethodStats(impl.methods[0], impl, resolver)
        assert stats.inherited is True
        assert stats.documented == stats.documentable == 3

    def test_no_credit_from_partially_documented_ancestor(self) -> None:
        partial = _greet("Greets someone.")
        iface = _interface("Greeter", methods=(partial,))
        impl = _class("Impl", interfaces=("p.Greeter",), methods=(_greet(),))
        resolver = OverrideResolver(_model(iface, impl))

        stats = MethodStats(impl.methods[0], impl, resolver)
        assert stats.inherited is False
        assert stats.documented == 0

    def test_partial_own_documentation_gets_no_credit(self) -> None:
        iface = _interface("Greeter", methods=(_documented_greet(),))
        own = _greet("Says hello.")
        impl = _class("Impl", interfaces=("p.Greeter",), methods=(own,))
        resolver = OverrideResolver(_model(iface, impl))

        stats = MethodStats(own, impl, resolver)
        assert stats.inherited is False
        assert stats.documented == 1

    def test_credit_through_superclass_chain(self) -> None:
        root = _class("Root", methods=(_documented_greet(),))
        middle = _class("Middle", superclass="p.Root")
        leaf = _class("Leaf", superclass="p.Middle", methods=(_greet(),))
        resolver = OverrideResolver(_model(root, middle, leaf))

        assert MethodStats(leaf.methods[0], leaf, resolver).inherited is True

    def test_credit_is_transitive_through_inherited_ancestor(self) -> None:
        iface = _interface("Greeter", methods=(_documented_greet(),))
        base = _class("Base", interfaces=("p.Greeter",), methods=(_greet(),))
        leaf = _class("Leaf", superclass="p.Base", methods=(_greet(),))
        resolver = OverrideResolver(_model(iface, base, leaf))

        assert resolver.is_fully_documented(base, base.methods[0]) is True
        assert MethodStats(leaf.methods[0], leaf, resolver).inherited is True

    def test_different_signature_is_not_an_override(self) -> None:
        other = MethodInfo(
            name="greet",
            comment="Greets.",
            parameters=(ParameterInfo("count", "int"),),
            tags=(TagInfo("@param", "count times"),),
        )
        iface = _interface("Greeter", methods=(other,))
        impl = _class("Impl", interfaces=("p.Greeter",), methods=(_greet(),))
        resolver = OverrideResolver(_model(iface, impl))

        assert MethodStats(impl.methods[0], impl, resolver).documented == 0

    def test_constructors_never_inherit(self) -> None:
        ctor = MethodInfo(name="T", kind=MethodKind.CONSTRUCTOR)
        base = TypeInfo(
            name="Base",
            package="p",
            constructors=(
                MethodInfo(name="T", kind=MethodKind.CONSTRUCTOR, comment="Doc."),
            ),
        )
        child = _class("T", superclass="p.Base", constructors=(ctor,))
        resolver = OverrideResolver(_model(base, child))
        assert MethodStats(ctor, child, resolver).inherited is False

    def test_unknown_ancestor_is_skipped(self) -> None:
        impl = _class("Impl", superclass="java.lang.Object", methods=(_greet(),))
        resolver = OverrideResolver(_model(impl))
        assert MethodStats(impl.methods[0], impl, resolver).documented == 0


class TestOverrideResolver:
    """Tests for ancestor walking and memoization."""

    def _diamond(self) -> tuple:
        top = _interface("Top", methods=(_documented_greet(),))
        left = _interface("Left", interfaces=("p.Top",))
        right = _interface("Right", interfaces=("p.Top",))
        impl = _class("Impl", interfaces=("p.Left", "p.Right"), methods=(_greet(),))
        return top, left, right, impl

    def test_diamond_visits_ancestor_once(self) -> None:
        top, left, right, impl = self._diamond()
        resolver = OverrideResolver(_model(top, left, right, impl))
        names = [t.qualified_name for t in resolver.ancestors(impl)]
        assert names == ["p.Left", "p.Right", "p.Top"]
        assert len(resolver.overridden_methods(impl, impl.methods[0])) == 1

    def test_diamond_credit(self) -> None:
        top, left, right, impl = self._diamond()
        resolver = OverrideResolver(_model(top, left, right, impl))
        assert MethodStats(impl.methods[0], impl, resolver).inherited is True

    def test_memoized_per_method(self, monkeypatch: pytest.MonkeyPatch) -> None:
        top, left, right, impl = self._diamond()
        resolver = OverrideResolver(_model(top, left, right, impl))
        resolver.inherits_documentation(impl, impl.methods[0])

        calls = []
        original = resolver.overridden_methods

        def counting(owner, method):
            calls.append(owner.name)
            return original(owner, method)

        monkeypatch.setattr(resolver, "overridden_methods", counting)
        assert resolver.inherits_documentation(impl, impl.methods[0]) is True
        assert resolver.is_fully_documented(top, top.methods[0]) is True
        assert calls == []

    def test_inheritance_cycle_terminates(self) -> None:
        a = _class("A", superclass="p.B", methods=(_greet(),))
        b = _class("B", superclass="p.A", methods=(_greet(),))
        resolver = OverrideResolver(_model(a, b))

        assert [t.name for t in resolver.ancestors(a)] == ["B"]
        stats = MethodStats(a.methods[0], a, resolver)
        assert stats.documented == 0

    def test_self_referencing_interface(self) -> None:
        loop = _interface("Loop", interfaces=("p.Loop",))
        resolver = OverrideResolver(_model(loop))
        assert resolver.ancestors(loop) == []

    def test_shared_between_threads(self) -> None:
        top, left, right, impl = self._diamond()
        resolver = OverrideResolver(_model(top, left, right, impl))
        results = []

        def worker() -> None:
            results.append(MethodStats(impl.methods[0], impl, resolver).documented)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert results == [3] * 8
