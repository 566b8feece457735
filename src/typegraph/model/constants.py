# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Well-known types of the target language."""

from typegraph.model.entities import Kind, Modifier, TypeDef, TypeParamDef
from typegraph.model.types import ClassRef, PrimitiveRef

# ###############
# Public Interface
# ###############

JAVA_LANG_OBJECT = "java.lang.Object"
JAVA_LANG_BOOLEAN = "java.lang.Boolean"

JAVA_UTIL_OPTIONAL = "java.util.Optional"
JAVA_UTIL_OPTIONAL_INT = "java.util.OptionalInt"
JAVA_UTIL_OPTIONAL_DOUBLE = "java.util.OptionalDouble"
JAVA_UTIL_OPTIONAL_LONG = "java.util.OptionalLong"

JAVA_UTIL_COLLECTION = "java.util.Collection"
JAVA_UTIL_LIST = "java.util.List"
JAVA_UTIL_SET = "java.util.Set"
JAVA_UTIL_MAP = "java.util.Map"

OBJECT = TypeDef(fully_qualified_name=JAVA_LANG_OBJECT, modifiers=frozenset({Modifier.PUBLIC}))
OBJECT_REF = ClassRef(fully_qualified_name=JAVA_LANG_OBJECT)

BOOLEAN_REF = ClassRef(fully_qualified_name=JAVA_LANG_BOOLEAN)
PRIMITIVE_BOOLEAN_REF = PrimitiveRef(name="boolean")
VOID_REF = PrimitiveRef(name="void")

# The collection family, in the shape the front end registers it: List and Set
# are sub-interfaces of Collection, Map stands alone.
COLLECTION = TypeDef(
    fully_qualified_name=JAVA_UTIL_COLLECTION,
    kind=Kind.INTERFACE,
    modifiers=frozenset({Modifier.PUBLIC}),
    parameters=(TypeParamDef(name="E"),),
)
LIST = TypeDef(
    fully_qualified_name=JAVA_UTIL_LIST,
    kind=Kind.INTERFACE,
    modifiers=frozenset({Modifier.PUBLIC}),
    parameters=(TypeParamDef(name="E"),),
    extends_list=(COLLECTION.to_reference(),),
)
SET = TypeDef(
    fully_qualified_name=JAVA_UTIL_SET,
    kind=Kind.INTERFACE,
    modifiers=frozenset({Modifier.PUBLIC}),
    parameters=(TypeParamDef(name="E"),),
    extends_list=(COLLECTION.to_reference(),),
)
MAP = TypeDef(
    fully_qualified_name=JAVA_UTIL_MAP,
    kind=Kind.INTERFACE,
    modifiers=frozenset({Modifier.PUBLIC}),
    parameters=(TypeParamDef(name="K"), TypeParamDef(name="V")),
)

WELL_KNOWN_TYPES: tuple[TypeDef, ...] = (OBJECT, COLLECTION, LIST, SET, MAP)
