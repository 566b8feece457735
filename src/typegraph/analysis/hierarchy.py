# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Hierarchy resolution over a definition repository.

Two walks are provided:

* :func:`unroll_hierarchy` follows ``extends`` edges only and answers "which
  definitions contribute members to this type".
* :func:`visit_parents` follows ``implements`` and ``extends`` edges and
  produces a post-order list in which every ancestor precedes its
  descendants, the order in which an emitter must declare them.

Both walks stop at the configured root type, skip super-type references that
do not resolve, and guard against cyclic graphs. What happens on a cycle is
decided by :attr:`ModelConfig.on_cycle <typegraph.repository.ModelConfig.on_cycle>`.
"""

from __future__ import annotations

import logging

from typegraph.model.entities import Method, Property, TypeDef
from typegraph.model.types import ClassRef, TypeRef
from typegraph.repository.definitions import DefinitionRepository

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class HierarchyCycleError(Exception):
    """Raised when a super-type graph contains a cycle and the policy is ``"error"``.

    Attributes:
        cycle: Fully-qualified names forming the cycle, with the first name
            repeated at the end.
    """

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__(f"Cyclic type hierarchy: {' -> '.join(cycle)}")


def unroll_hierarchy(type_def: TypeDef, repository: DefinitionRepository) -> set[TypeDef]:
    """Return *type_def* and all of its superclasses.

    The root type contributes nothing, so unrolling the root itself yields an
    empty set. At most one definition per fully-qualified name is included.

    Raises:
        HierarchyCycleError: If the extends-graph is cyclic and the repository
            is configured with ``on_cycle="error"``.
    """
    return set(_unroll_ordered(type_def, repository))


def has_method(type_def: TypeDef, method: str, repository: DefinitionRepository) -> bool:
    """Return True if *type_def* or any superclass declares a method named *method*."""
    return any(m.name == method for m in all_methods(type_def, repository))


def has_property(type_def: TypeDef, prop: str, repository: DefinitionRepository) -> bool:
    """Return True if *type_def* or any superclass declares a property named *prop*."""
    return any(p.name == prop for p in all_properties(type_def, repository))


def all_properties(type_def: TypeDef, repository: DefinitionRepository) -> list[Property]:
    """Return all properties including inherited ones, most-derived type first.

    Properties are not de-duplicated: a property shadowed in a subclass is
    listed once per declaring type.
    """
    return [p for h in _unroll_ordered(type_def, repository) for p in h.properties]


def all_methods(type_def: TypeDef, repository: DefinitionRepository) -> list[Method]:
    """Return all methods including inherited ones, most-derived type first."""
    return [m for h in _unroll_ordered(type_def, repository) for m in h.methods]


def is_abstract(reference: TypeRef, repository: DefinitionRepository) -> bool:
    """Return True if *reference* resolves to an abstract type.

    An unresolved reference is reported as not abstract.
    """
    definition = repository.resolve(reference)
    return definition.is_abstract if definition is not None else False


def is_concrete(reference: TypeRef, repository: DefinitionRepository) -> bool:
    """Return True if *reference* resolves to a type that is neither abstract nor an interface.

    An unresolved reference is reported as not concrete.
    """
    definition = repository.resolve(reference)
    if definition is None:
        return False
    return not definition.is_abstract and not definition.is_interface


def is_instance_of(
    reference: TypeRef,
    target: TypeDef | str,
    repository: DefinitionRepository,
) -> bool:
    """Return True if *reference* names *target* or one of its subtypes.

    Both ``implements`` and ``extends`` edges are followed. Only class
    references can be instances of anything; primitives and type parameters
    always return False.
    """
    target_name = target if isinstance(target, str) else target.fully_qualified_name
    pending: list[TypeRef] = [reference]
    seen: set[str] = set()
    while pending:
        current = pending.pop()
        if not isinstance(current, ClassRef):
            continue
        name = current.fully_qualified_name
        if name == target_name:
            return True
        if name in seen:
            continue
        seen.add(name)
        definition = repository.resolve(current)
        if definition is None:
            continue
        pending.extend(definition.implements_list)
        pending.extend(definition.extends_list)
    return False


def visit_parents(
    type_def: TypeDef | None,
    repository: DefinitionRepository,
    types: list[TypeDef] | None = None,
    visited: set[str] | None = None,
) -> list[TypeDef]:
    """Collect *type_def* and its ancestors in declaration order.

    Every type is appended after all of its implemented interfaces and
    superclasses, so the returned list ends with *type_def* itself.

    Args:
        type_def: The type to start from. ``None`` is accepted and contributes
            nothing, which lets callers pass an unresolved lookup straight in.
        repository: Repository used to dereference super-type references.
        types: Optional accumulator to append to. It is also returned.
        visited: Optional set of fully-qualified names already visited. Those
            types (and anything reachable only through them) are skipped. The
            set is updated in place, so it can be threaded through several
            calls that share one output list.

    Returns:
        The accumulator list.

    Raises:
        HierarchyCycleError: If the super-type graph is cyclic and the
            repository is configured with ``on_cycle="error"``.
    """
    if types is None:
        types = []
    walker = _HierarchyWalker(repository, visited)
    if type_def is not None:
        walker.visit_parents(type_def, types)
    return types


# ################
# Implementation
# ################


def _unroll_ordered(type_def: TypeDef, repository: DefinitionRepository) -> list[TypeDef]:
    """Unroll the extends-hierarchy of *type_def* in pre-order (type first)."""
    result: list[TypeDef] = []
    _HierarchyWalker(repository).unroll(type_def, result)
    return result


class _HierarchyWalker:
    """Depth-first walker shared by both hierarchy traversals.

    ``_path`` holds the names currently being visited and is what detects a
    cycle; ``_done`` holds names that are fully explored, which is what stops
    diamonds from being expanded twice.
    """

    def __init__(self, repository: DefinitionRepository, done: set[str] | None = None) -> None:
        self._repository = repository
        self._root = repository.root_type
        self._strict = repository.config.on_cycle == "error"
        self._done: set[str] = done if done is not None else set()
        self._path: list[str] = []

    def unroll(self, type_def: TypeDef, result: list[TypeDef]) -> None:
        name = type_def.fully_qualified_name
        if name == self._root or name in self._done:
            return
        if name in self._path:
            self._on_cycle(name)
            return

        self._path.append(name)
        result.append(type_def)
        for ref in type_def.extends_list:
            parent = self._resolve_parent(type_def, ref)
            if parent is not None:
                self.unroll(parent, result)
        self._path.pop()
        self._done.add(name)

    def visit_parents(self, type_def: TypeDef, types: list[TypeDef]) -> None:
        name = type_def.fully_qualified_name
        if name == self._root or name in self._done:
            return
        if name in self._path:
            self._on_cycle(name)
            return

        self._path.append(name)
        for ref in (*type_def.implements_list, *type_def.extends_list):
            parent = self._resolve_parent(type_def, ref)
            if parent is not None:
                self.visit_parents(parent, types)
        self._path.pop()
        self._done.add(name)
        types.append(type_def)

    def _resolve_parent(self, child: TypeDef, ref: ClassRef) -> TypeDef | None:
        parent = self._repository.resolve(ref)
        if parent is None:
            logger.debug(
                "Super-type '%s' of '%s' is not registered; stopping this branch",
                ref.fully_qualified_name,
                child.fully_qualified_name,
            )
        return parent

    def _on_cycle(self, name: str) -> None:
        cycle = self._path[self._path.index(name) :] + [name]
        if self._strict:
            raise HierarchyCycleError(cycle)
        logger.warning("Cyclic type hierarchy truncated: %s", " -> ".join(cycle))
