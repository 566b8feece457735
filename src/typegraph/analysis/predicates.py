# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural predicates on type references."""

from __future__ import annotations

from typegraph.analysis.hierarchy import is_instance_of
from typegraph.model.constants import (
    BOOLEAN_REF,
    JAVA_UTIL_COLLECTION,
    JAVA_UTIL_LIST,
    JAVA_UTIL_MAP,
    JAVA_UTIL_OPTIONAL,
    JAVA_UTIL_OPTIONAL_DOUBLE,
    JAVA_UTIL_OPTIONAL_INT,
    JAVA_UTIL_OPTIONAL_LONG,
    JAVA_UTIL_SET,
    PRIMITIVE_BOOLEAN_REF,
)
from typegraph.model.types import ClassRef, PrimitiveRef, TypeRef
from typegraph.repository.definitions import DefinitionRepository

# ###############
# Public Interface
# ###############


def is_primitive(type_ref: TypeRef) -> bool:
    """Return True if *type_ref* is a primitive type (arrays of primitives included)."""
    return isinstance(type_ref, PrimitiveRef)


def is_array(type_ref: TypeRef) -> bool:
    """Return True if *type_ref* has at least one array dimension."""
    return type_ref.dimensions > 0


def is_boolean(type_ref: TypeRef) -> bool:
    """Return True for ``boolean`` and ``java.lang.Boolean`` (non-array)."""
    if isinstance(type_ref, PrimitiveRef):
        return type_ref == PRIMITIVE_BOOLEAN_REF
    if isinstance(type_ref, ClassRef):
        return type_ref == BOOLEAN_REF
    return False


def is_optional(type_ref: TypeRef) -> bool:
    """Return True if *type_ref* is a ``java.util.Optional``."""
    return _is_named(type_ref, JAVA_UTIL_OPTIONAL)


def is_optional_int(type_ref: TypeRef) -> bool:
    """Return True if *type_ref* is a ``java.util.OptionalInt``."""
    return _is_named(type_ref, JAVA_UTIL_OPTIONAL_INT)


def is_optional_double(type_ref: TypeRef) -> bool:
    """Return True if *type_ref* is a ``java.util.OptionalDouble``."""
    return _is_named(type_ref, JAVA_UTIL_OPTIONAL_DOUBLE)


def is_optional_long(type_ref: TypeRef) -> bool:
    """Return True if *type_ref* is a ``java.util.OptionalLong``."""
    return _is_named(type_ref, JAVA_UTIL_OPTIONAL_LONG)


def is_map(type_ref: TypeRef, repository: DefinitionRepository) -> bool:
    """Return True if *type_ref* is ``java.util.Map`` or one of its subtypes."""
    return is_instance_of(type_ref, JAVA_UTIL_MAP, repository)


def is_list(type_ref: TypeRef, repository: DefinitionRepository) -> bool:
    """Return True if *type_ref* is ``java.util.List`` or one of its subtypes."""
    return is_instance_of(type_ref, JAVA_UTIL_LIST, repository)


def is_set(type_ref: TypeRef, repository: DefinitionRepository) -> bool:
    """Return True if *type_ref* is ``java.util.Set`` or one of its subtypes."""
    return is_instance_of(type_ref, JAVA_UTIL_SET, repository)


def is_collection(type_ref: TypeRef, repository: DefinitionRepository) -> bool:
    """Return True if *type_ref* is ``java.util.Collection`` or one of its subtypes."""
    return is_instance_of(type_ref, JAVA_UTIL_COLLECTION, repository)


# ################
# Implementation
# ################


def _is_named(type_ref: TypeRef, fully_qualified_name: str) -> bool:
    return isinstance(type_ref, ClassRef) and type_ref.fully_qualified_name == fully_qualified_name
