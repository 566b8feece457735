# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Binding of declared type parameters to concrete type references.

A binding maps a declared parameter (by name, or by its :class:`TypeParamDef`)
to the reference that replaces it at a use site. Parameters without a binding
stay open: they are left untouched and never reported as errors.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from typegraph.model.entities import Method, Property, TypeDef, TypeParamDef
from typegraph.model.types import ClassRef, PrimitiveRef, TypeParamRef, TypeRef

# ###############
# Public Interface
# ###############

Bindings = Mapping[str | TypeParamDef, TypeRef]


def get_parameter_definition(type_ref: TypeRef, parameters: Iterable[TypeParamDef]) -> TypeParamDef | None:
    """Return the declared parameter whose name matches *type_ref*, or None."""
    name = _reference_name(type_ref)
    for parameter in parameters:
        if parameter.name == name:
            return parameter
    return None


def new_type_param_ref(name: str) -> TypeParamRef:
    """Create a reference to the type parameter *name*."""
    return TypeParamRef(name=name)


def new_type_param_def(name: str, *bounds: TypeRef) -> TypeParamDef:
    """Create a type parameter declaration, optionally bounded."""
    return TypeParamDef(name=name, bounds=tuple(bounds))


def bindings_for(type_def: TypeDef, reference: ClassRef) -> dict[str, TypeRef]:
    """Pair the declared parameters of *type_def* with the arguments of *reference*.

    A raw reference (no arguments) binds nothing. Surplus parameters or
    arguments are ignored.
    """
    return {p.name: a for p, a in zip(type_def.parameters, reference.arguments)}


def bind(type_ref: TypeRef, bindings: Bindings) -> TypeRef:
    """Replace bound type parameters in *type_ref*.

    Array dimensions of a substituted parameter are added to those of the
    replacement, so binding ``T[]`` with ``T -> String`` yields ``String[]``.
    Substitution is applied recursively to generic arguments.
    """
    return _bind_ref(type_ref, _normalize(bindings))


def bind_definition(type_def: TypeDef, bindings: Bindings) -> TypeDef:
    """Return a copy of *type_def* with *bindings* applied throughout.

    Super-types, parameter bounds, properties, and methods are rewritten and
    the bound parameters are removed from the declared parameter list. A
    method that declares its own parameter of the same name shadows the
    type-level binding inside that method.
    """
    names = _normalize(bindings)
    remaining = tuple(
        TypeParamDef(name=p.name, bounds=tuple(_bind_ref(b, names) for b in p.bounds))
        for p in type_def.parameters
        if p.name not in names
    )
    return type_def.model_copy(
        update={
            "parameters": remaining,
            "extends_list": tuple(_bind_class_ref(r, names) for r in type_def.extends_list),
            "implements_list": tuple(_bind_class_ref(r, names) for r in type_def.implements_list),
            "properties": tuple(_bind_property(p, names) for p in type_def.properties),
            "methods": tuple(_bind_method(m, names) for m in type_def.methods),
        }
    )


# ################
# Implementation
# ################


def _reference_name(type_ref: TypeRef) -> str:
    if isinstance(type_ref, ClassRef):
        return type_ref.fully_qualified_name
    if isinstance(type_ref, PrimitiveRef | TypeParamRef):
        return type_ref.name
    return str(type_ref)


def _normalize(bindings: Bindings) -> dict[str, TypeRef]:
    return {(k.name if isinstance(k, TypeParamDef) else k): v for k, v in bindings.items()}


def _bind_ref(type_ref: TypeRef, bindings: dict[str, TypeRef]) -> TypeRef:
    if isinstance(type_ref, TypeParamRef):
        bound = bindings.get(type_ref.name)
        if bound is None:
            return type_ref
        if type_ref.dimensions == 0:
            return bound
        return bound.with_dimensions(bound.dimensions + type_ref.dimensions)
    if isinstance(type_ref, ClassRef):
        return _bind_class_ref(type_ref, bindings)
    return type_ref


def _bind_class_ref(type_ref: ClassRef, bindings: dict[str, TypeRef]) -> ClassRef:
    if not type_ref.arguments:
        return type_ref
    return type_ref.with_arguments(*(_bind_ref(a, bindings) for a in type_ref.arguments))


def _bind_property(prop: Property, bindings: dict[str, TypeRef]) -> Property:
    return prop.model_copy(update={"type": _bind_ref(prop.type, bindings)})


def _bind_method(method: Method, bindings: dict[str, TypeRef]) -> Method:
    own = {p.name for p in method.parameters}
    scoped = {k: v for k, v in bindings.items() if k not in own}
    if not scoped:
        return method
    return method.model_copy(
        update={
            "return_type": _bind_ref(method.return_type, scoped),
            "arguments": tuple(_bind_property(a, scoped) for a in method.arguments),
            "exceptions": tuple(_bind_class_ref(e, scoped) for e in method.exceptions),
            "parameters": tuple(
                TypeParamDef(name=p.name, bounds=tuple(_bind_ref(b, scoped) for b in p.bounds))
                for p in method.parameters
            ),
        }
    )
