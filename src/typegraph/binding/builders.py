# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Copy-on-write transforms of type definitions and small naming helpers."""

from __future__ import annotations

from collections.abc import Iterable

from typegraph.model.entities import Modifier, TypeDef, TypeParamDef
from typegraph.model.types import ClassRef

# ###############
# Public Interface
# ###############

# Access flags as encoded in class files.
ACC_PUBLIC = 0x0001
ACC_PRIVATE = 0x0002
ACC_PROTECTED = 0x0004
ACC_STATIC = 0x0008
ACC_FINAL = 0x0010
ACC_SYNCHRONIZED = 0x0020
ACC_TRANSIENT = 0x0080
ACC_NATIVE = 0x0100
ACC_ABSTRACT = 0x0400

OTHER = "other"


def type_generic_of(base: TypeDef, *parameters: TypeParamDef) -> TypeDef:
    """Return a copy of *base* whose declared type parameters are *parameters*."""
    return base.model_copy(update={"parameters": tuple(parameters)})


def unwrap_generic(base: TypeDef) -> TypeDef:
    """Return a copy of *base* without type parameters (its erasure view)."""
    return base.model_copy(update={"parameters": ()})


def type_extends(base: TypeDef, *super_classes: ClassRef) -> TypeDef:
    """Return a copy of *base* that additionally extends *super_classes*.

    References already present in the extends list are not added twice.
    """
    return base.model_copy(update={"extends_list": _append(base.extends_list, super_classes)})


def type_implements(base: TypeDef, *interfaces: ClassRef) -> TypeDef:
    """Return a copy of *base* that additionally implements *interfaces*."""
    return base.model_copy(update={"implements_list": _append(base.implements_list, interfaces)})


def modifiers_to_int(modifiers: Iterable[Modifier]) -> int:
    """Fold *modifiers* into a class-file access flag bit mask.

    Modifiers without an access flag (e.g. ``default`` or ``sealed``) are
    ignored.
    """
    result = 0
    for modifier in modifiers:
        result |= _ACCESS_FLAGS.get(modifier, 0)
    return result


def fully_qualified_name_diff(left: str, right: str) -> str:
    """Return the right-most segment of *right* that differs from *left*.

    Segments are compared from the end of both names towards the start. When
    every compared segment matches, up to the length of the shorter name,
    ``"other"`` is returned.

    >>> fully_qualified_name_diff("com.acme.foo.Bar", "com.acme.baz.Bar")
    'baz'
    """
    lparts = left.split(".")
    rparts = right.split(".")
    for lpart, rpart in zip(reversed(lparts), reversed(rparts)):
        if lpart != rpart:
            return rpart
    return OTHER


def to_class_name(value: object) -> str:
    """Return a fully-qualified class name for a string, reference, or definition.

    Anything else is converted with :func:`str`.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, ClassRef | TypeDef):
        return value.fully_qualified_name
    return str(value)


# ################
# Implementation
# ################

_ACCESS_FLAGS: dict[Modifier, int] = {
    Modifier.ABSTRACT: ACC_ABSTRACT,
    Modifier.FINAL: ACC_FINAL,
    Modifier.NATIVE: ACC_NATIVE,
    Modifier.PRIVATE: ACC_PRIVATE,
    Modifier.PROTECTED: ACC_PROTECTED,
    Modifier.PUBLIC: ACC_PUBLIC,
    Modifier.STATIC: ACC_STATIC,
    Modifier.SYNCHRONIZED: ACC_SYNCHRONIZED,
    Modifier.TRANSIENT: ACC_TRANSIENT,
}


def _append(existing: tuple[ClassRef, ...], extra: Iterable[ClassRef]) -> tuple[ClassRef, ...]:
    result = list(existing)
    for ref in extra:
        if ref not in result:
            result.append(ref)
    return tuple(result)
