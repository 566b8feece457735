# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for a populated definition repository.

These checks run once the front end has registered every definition of a
run. They report graph problems up front, so that hierarchy walks performed
later by emitters do not have to stop on them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from typegraph.model.entities import Kind, TypeDef
from typegraph.repository.definitions import DefinitionRepository

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal problem in the type graph.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A problem that makes the type graph invalid.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the consistency checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that indicate an invalid type graph.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(repository: DefinitionRepository) -> ValidationResult:
    """Run all consistency checks on the definitions in *repository*.

    Checks performed:

    1. **Unresolved super-types** (warning): an ``extends`` or ``implements``
       reference names a type that is neither registered nor carried inline.
       Hierarchy walks treat it as an unknown ancestor.

    2. **Hierarchy cycles** (error): following ``extends`` and
       ``implements`` edges leads back to the starting type.

    3. **Multiple superclasses** (error): a class or enum extends more than
       one type. Only interfaces may extend several.

    4. **Duplicate properties** (error): a definition declares two properties
       with the same name.

    Args:
        repository: The populated repository.

    Returns:
        A :class:`ValidationResult` containing any warnings and errors found.
    """
    definitions = repository.definitions()
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    warnings.extend(_check_unresolved_super_types(definitions, repository))
    errors.extend(_check_hierarchy_cycles(definitions, repository))
    errors.extend(_check_single_inheritance(definitions))
    errors.extend(_check_duplicate_properties(definitions))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _find_cycles(graph: dict[str, list[str]]) -> list[list[str]]:
    """Return the cycle closed by each back edge of a depth-first search.

    A node stays on ``path`` while its super-types are being searched. Every
    edge into such a node closes a cycle, returned as the path slice from
    that node with the node repeated at the end (e.g. ``["A", "B", "A"]``).
    Nodes shared by several cycles stay in the graph, so each cycle is found.
    """
    on_path: set[str] = set()
    finished: set[str] = set()
    path: list[str] = []
    cycles: list[list[str]] = []

    def _visit(node: str) -> None:
        on_path.add(node)
        path.append(node)
        for target in graph.get(node, []):
            if target in on_path:
                cycles.append(path[path.index(target) :] + [target])
            elif target not in finished:
                _visit(target)
        path.pop()
        on_path.discard(node)
        finished.add(node)

    for node in graph:
        if node not in finished:
            _visit(node)
    return cycles


def _check_unresolved_super_types(
    definitions: list[TypeDef], repository: DefinitionRepository
) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for definition in definitions:
        for ref in (*definition.extends_list, *definition.implements_list):
            if ref.fully_qualified_name == repository.root_type:
                continue
            if repository.resolve(ref) is None:
                warnings.append(
                    ValidationWarning(
                        message=(
                            f"Type '{definition.fully_qualified_name}' refers to unknown"
                            f" super-type '{ref.fully_qualified_name}'."
                        )
                    )
                )
    return warnings


def _check_hierarchy_cycles(definitions: list[TypeDef], repository: DefinitionRepository) -> list[ValidationError]:
    """Return one error per distinct cycle in the super-type graph."""
    graph: dict[str, list[str]] = {}
    for definition in definitions:
        graph[definition.fully_qualified_name] = [
            ref.fully_qualified_name
            for ref in (*definition.implements_list, *definition.extends_list)
            if ref.fully_qualified_name != repository.root_type
        ]

    errors: list[ValidationError] = []
    reported: set[tuple[str, ...]] = set()
    for cycle in _find_cycles(graph):
        key = tuple(cycle)
        if key in reported:
            continue
        reported.add(key)
        errors.append(ValidationError(message=f"Cyclic type hierarchy detected: {' -> '.join(cycle)}."))
    return errors


def _check_single_inheritance(definitions: list[TypeDef]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for definition in definitions:
        if definition.kind is not Kind.INTERFACE and len(definition.extends_list) > 1:
            names = ", ".join(ref.fully_qualified_name for ref in definition.extends_list)
            errors.append(
                ValidationError(
                    message=(
                        f"{definition.kind.value.capitalize()} '{definition.fully_qualified_name}'"
                        f" extends more than one type: {names}."
                    )
                )
            )
    return errors


def _check_duplicate_properties(definitions: list[TypeDef]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for definition in definitions:
        seen: set[str] = set()
        reported: set[str] = set()
        for prop in definition.properties:
            if prop.name in seen and prop.name not in reported:
                errors.append(
                    ValidationError(
                        message=(
                            f"Duplicate property name '{prop.name}' in type '{definition.fully_qualified_name}'."
                        )
                    )
                )
                reported.add(prop.name)
            seen.add(prop.name)
    return errors
