# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for hierarchy resolution."""

import logging

import pytest

from typegraph.analysis import (
    HierarchyCycleError,
    all_methods,
    all_properties,
    has_method,
    has_property,
    is_abstract,
    is_concrete,
    is_instance_of,
    unroll_hierarchy,
    visit_parents,
)
from typegraph.model import ClassRef, Kind, Method, Modifier, PrimitiveRef, Property, TypeDef, TypeParamRef
from typegraph.model.constants import OBJECT, OBJECT_REF, VOID_REF
from typegraph.repository import DefinitionRepository, ModelConfig

# ###############
# Helpers
# ###############

_STRING = ClassRef(fully_qualified_name="java.lang.String")


def _ref(name: str) -> ClassRef:
    return ClassRef(fully_qualified_name=name)


def _class(
    name: str,
    extends: tuple[str, ...] = ("java.lang.Object",),
    implements: tuple[str, ...] = (),
    props: tuple[str, ...] = (),
    methods: tuple[str, ...] = (),
    kind: Kind = Kind.CLASS,
    modifiers: frozenset[Modifier] = frozenset(),
) -> TypeDef:
    """Create a TypeDef with String properties and void no-arg methods."""
    return TypeDef(
        fully_qualified_name=name,
        kind=kind,
        modifiers=modifiers,
        extends_list=tuple(_ref(e) for e in extends),
        implements_list=tuple(_ref(i) for i in implements),
        properties=tuple(Property(name=p, type=_STRING) for p in props),
        methods=tuple(Method(name=m, return_type=VOID_REF) for m in methods),
    )


def _iface(name: str, extends: tuple[str, ...] = (), methods: tuple[str, ...] = ()) -> TypeDef:
    return _class(name, extends=extends, methods=methods, kind=Kind.INTERFACE)


def _repo(*definitions: TypeDef, on_cycle: str = "truncate") -> DefinitionRepository:
    return DefinitionRepository((OBJECT, *definitions), config=ModelConfig(on_cycle=on_cycle))  # type: ignore[arg-type]


def _names(definitions: object) -> set[str]:
    return {d.fully_qualified_name for d in definitions}  # type: ignore[attr-defined]


# ###############
# unroll_hierarchy
# ###############


def test_unroll_root_is_empty() -> None:
    """Unrolling the root type yields the empty set."""
    assert unroll_hierarchy(OBJECT, _repo()) == set()


def test_unroll_single_class() -> None:
    """A class directly under the root unrolls to itself."""
    a = _class("p.A")
    assert unroll_hierarchy(a, _repo(a)) == {a}


def test_unroll_chain() -> None:
    """A chain C -> B -> A -> Object unrolls to {C, B, A}."""
    a, b, c = _class("p.A"), _class("p.B", extends=("p.A",)), _class("p.C", extends=("p.B",))
    assert _names(unroll_hierarchy(c, _repo(a, b, c))) == {"p.A", "p.B", "p.C"}


def test_unroll_ignores_interfaces() -> None:
    """Implemented interfaces are not part of the unrolled class hierarchy."""
    i = _iface("p.I")
    a = _class("p.A", implements=("p.I",))
    assert _names(unroll_hierarchy(a, _repo(i, a))) == {"p.A"}


def test_unroll_interface_diamond() -> None:
    """An interface diamond includes the shared ancestor once."""
    top = _iface("p.Top")
    left = _iface("p.Left", extends=("p.Top",))
    right = _iface("p.Right", extends=("p.Top",))
    bottom = _iface("p.Bottom", extends=("p.Left", "p.Right"))
    result = unroll_hierarchy(bottom, _repo(top, left, right, bottom))
    assert _names(result) == {"p.Top", "p.Left", "p.Right", "p.Bottom"}
    assert len(result) == 4


def test_unroll_is_idempotent() -> None:
    """Unrolling twice yields equal sets."""
    a, b = _class("p.A"), _class("p.B", extends=("p.A",))
    repo = _repo(a, b)
    assert unroll_hierarchy(b, repo) == unroll_hierarchy(b, repo)


def test_unroll_stops_at_unresolved_super_type() -> None:
    """An unknown ancestor ends the walk without error."""
    a = _class("p.A", extends=("ext.Unknown",))
    assert unroll_hierarchy(a, _repo(a)) == {a}


def test_unroll_uses_inline_definition() -> None:
    """A super-type not in the registry is reached through its inline payload."""
    base = _class("p.Base", props=("id",))
    child = TypeDef(fully_qualified_name="p.Child", extends_list=(base.to_reference(),))
    assert _names(unroll_hierarchy(child, _repo(child))) == {"p.Base", "p.Child"}


def test_unroll_cycle_truncates(caplog: pytest.LogCaptureFixture) -> None:
    """A extends B extends A terminates and logs a warning."""
    a = _class("p.A", extends=("p.B",))
    b = _class("p.B", extends=("p.A",))
    with caplog.at_level(logging.WARNING, logger="typegraph.analysis.hierarchy"):
        result = unroll_hierarchy(a, _repo(a, b))
    assert _names(result) == {"p.A", "p.B"}
    assert any("p.A -> p.B -> p.A" in r.message for r in caplog.records)


def test_unroll_cycle_raises_in_strict_mode() -> None:
    """With on_cycle='error' a cycle raises HierarchyCycleError."""
    a = _class("p.A", extends=("p.B",))
    b = _class("p.B", extends=("p.A",))
    with pytest.raises(HierarchyCycleError) as exc_info:
        unroll_hierarchy(a, _repo(a, b, on_cycle="error"))
    assert exc_info.value.cycle == ["p.A", "p.B", "p.A"]


def test_unroll_self_cycle() -> None:
    """A type that extends itself terminates."""
    a = _class("p.A", extends=("p.A",))
    assert unroll_hierarchy(a, _repo(a)) == {a}


def test_custom_root_type() -> None:
    """The configured root type ends the walk."""
    any_def = TypeDef(fully_qualified_name="kotlin.Any")
    a = _class("p.A", extends=("kotlin.Any",))
    repo = DefinitionRepository([any_def, a], config=ModelConfig(root_type="kotlin.Any"))
    assert unroll_hierarchy(a, repo) == {a}
    assert unroll_hierarchy(any_def, repo) == set()


# ###############
# Member queries
# ###############


def test_has_method_and_property_inherited() -> None:
    """Members declared on a superclass are found from the subclass."""
    a = _class("p.A", props=("id",), methods=("getId",))
    b = _class("p.B", extends=("p.A",), props=("name",), methods=("getName",))
    repo = _repo(a, b)

    assert has_property(b, "id", repo)
    assert has_property(b, "name", repo)
    assert not has_property(a, "name", repo)
    assert has_method(b, "getId", repo)
    assert not has_method(b, "missing", repo)


def test_all_properties_order_and_duplicates() -> None:
    """all_properties lists the most-derived type first and keeps shadowed names."""
    a = _class("p.A", props=("id", "name"))
    b = _class("p.B", extends=("p.A",), props=("name", "age"))
    props = all_properties(b, _repo(a, b))
    assert [p.name for p in props] == ["name", "age", "id", "name"]


def test_all_methods() -> None:
    """all_methods collects inherited methods."""
    a = _class("p.A", methods=("run",))
    b = _class("p.B", extends=("p.A",), methods=("stop",))
    assert [m.name for m in all_methods(b, _repo(a, b))] == ["stop", "run"]


def test_member_queries_on_cycle_terminate() -> None:
    """Member queries over a cyclic hierarchy terminate."""
    a = _class("p.A", extends=("p.B",), props=("x",))
    b = _class("p.B", extends=("p.A",), props=("y",))
    repo = _repo(a, b)
    assert has_property(a, "y", repo)
    assert not has_property(a, "z", repo)


# ###############
# Abstract / concrete
# ###############


def test_abstract_and_concrete() -> None:
    """Abstract classes and interfaces are not concrete."""
    abstract = _class("p.Shape", modifiers=frozenset({Modifier.ABSTRACT}))
    concrete = _class("p.Circle", extends=("p.Shape",))
    interface = _iface("p.Drawable")
    repo = _repo(abstract, concrete, interface)

    assert is_abstract(_ref("p.Shape"), repo)
    assert not is_concrete(_ref("p.Shape"), repo)
    assert not is_abstract(_ref("p.Circle"), repo)
    assert is_concrete(_ref("p.Circle"), repo)
    assert not is_abstract(_ref("p.Drawable"), repo)
    assert not is_concrete(_ref("p.Drawable"), repo)


def test_unresolved_is_neither_abstract_nor_concrete() -> None:
    """An unknown reference is conservatively neither abstract nor concrete."""
    repo = _repo()
    for ref in (_ref("ext.Unknown"), PrimitiveRef(name="int"), TypeParamRef(name="T")):
        assert not is_abstract(ref, repo)
        assert not is_concrete(ref, repo)


def test_abstract_falls_back_to_inline_definition() -> None:
    """is_abstract consults the inline payload when the registry misses."""
    inline = _class("p.Inline", modifiers=frozenset({Modifier.ABSTRACT}))
    assert is_abstract(inline.to_reference(), _repo())


# ###############
# visit_parents
# ###############


def test_visit_parents_post_order() -> None:
    """Ancestors precede descendants and the visited type comes last."""
    i = _iface("p.I")
    j = _iface("p.J", extends=("p.I",))
    a = _class("p.A", implements=("p.I",))
    b = _class("p.B", extends=("p.A",), implements=("p.J",))
    result = visit_parents(b, _repo(i, j, a, b))

    names = [d.fully_qualified_name for d in result]
    assert names[-1] == "p.B"
    assert sorted(names) == ["p.A", "p.B", "p.I", "p.J"]
    assert names.index("p.I") < names.index("p.J")
    assert names.index("p.I") < names.index("p.A")
    assert names.index("p.A") < names.index("p.B")


def test_visit_parents_excludes_root() -> None:
    """The root type never appears in the result."""
    a = _class("p.A")
    assert visit_parents(a, _repo(a)) == [a]
    assert visit_parents(OBJECT, _repo()) == []


def test_visit_parents_none_and_unresolved() -> None:
    """None contributes nothing and unresolved parents are skipped."""
    a = _class("p.A", implements=("ext.Missing",))
    repo = _repo(a)
    assert visit_parents(None, repo) == []
    assert visit_parents(a, repo) == [a]


def test_visit_parents_threads_accumulator_and_visited() -> None:
    """A shared accumulator and visited set avoid emitting a type twice."""
    i = _iface("p.I")
    a = _class("p.A", implements=("p.I",))
    b = _class("p.B", implements=("p.I",))
    repo = _repo(i, a, b)

    types: list[TypeDef] = []
    visited: set[str] = set()
    visit_parents(a, repo, types, visited)
    visit_parents(b, repo, types, visited)

    assert [d.fully_qualified_name for d in types] == ["p.I", "p.A", "p.B"]
    assert visited == {"p.I", "p.A", "p.B"}


def test_visit_parents_cycle_terminates() -> None:
    """A cycle through implements and extends edges terminates."""
    a = _class("p.A", implements=("p.I",))
    i = _iface("p.I", extends=("p.A",))
    result = visit_parents(a, _repo(a, i))
    assert [d.fully_qualified_name for d in result] == ["p.I", "p.A"]


def test_visit_parents_cycle_strict() -> None:
    """With on_cycle='error' visit_parents raises on a cycle."""
    a = _class("p.A", extends=("p.B",))
    b = _class("p.B", extends=("p.A",))
    with pytest.raises(HierarchyCycleError, match="p.A -> p.B -> p.A"):
        visit_parents(a, _repo(a, b, on_cycle="error"))


def test_diamond_is_not_a_cycle_in_strict_mode() -> None:
    """Reaching an already explored type through a second path is allowed."""
    top = _iface("p.Top")
    left = _iface("p.Left", extends=("p.Top",))
    right = _iface("p.Right", extends=("p.Top",))
    bottom = _class("p.Bottom", implements=("p.Left", "p.Right"))
    repo = _repo(top, left, right, bottom, on_cycle="error")
    names = [d.fully_qualified_name for d in visit_parents(bottom, repo)]
    assert names == ["p.Top", "p.Left", "p.Right", "p.Bottom"]


# ###############
# is_instance_of
# ###############


def test_is_instance_of() -> None:
    """is_instance_of follows implements and extends edges."""
    i = _iface("p.I")
    a = _class("p.A", implements=("p.I",))
    b = _class("p.B", extends=("p.A",))
    repo = _repo(i, a, b)

    assert is_instance_of(_ref("p.B"), i, repo)
    assert is_instance_of(_ref("p.B"), "p.A", repo)
    assert is_instance_of(_ref("p.B"), "p.B", repo)
    assert not is_instance_of(_ref("p.A"), "p.B", repo)
    assert not is_instance_of(PrimitiveRef(name="int"), "p.A", repo)


def test_is_instance_of_cycle_terminates() -> None:
    """is_instance_of terminates on a cyclic graph."""
    a = _class("p.A", extends=("p.B",))
    b = _class("p.B", extends=("p.A",))
    assert not is_instance_of(_ref("p.A"), "p.C", _repo(a, b))
    assert is_instance_of(OBJECT_REF, OBJECT, _repo())
