# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarations for the TypeGraph model: type definitions and their members."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from typegraph.model.types import ClassRef, TypeParamRef, TypeRef

# ###############
# Public Interface
# ###############


class Modifier(Enum):
    """Declaration modifiers of the target language."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ABSTRACT = "abstract"
    STATIC = "static"
    FINAL = "final"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    SYNCHRONIZED = "synchronized"
    NATIVE = "native"
    STRICTFP = "strictfp"
    DEFAULT = "default"
    SEALED = "sealed"
    NON_SEALED = "non-sealed"


class Kind(Enum):
    """The kind of a declared type."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"


class TypeParamDef(BaseModel):
    """A declared generic slot, e.g. ``T extends Comparable<T>``."""

    model_config = ConfigDict(frozen=True)

    name: str
    bounds: tuple[TypeRef, ...] = ()

    def to_reference(self, dimensions: int = 0) -> TypeParamRef:
        """Return a reference that uses this parameter."""
        return TypeParamRef(name=self.name, dimensions=dimensions)


class Property(BaseModel):
    """A named, typed member: a field, or an argument of a method."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeRef
    modifiers: frozenset[Modifier] = frozenset()


class Method(BaseModel):
    """A method declaration."""

    model_config = ConfigDict(frozen=True)

    name: str
    return_type: TypeRef
    arguments: tuple[Property, ...] = ()
    exceptions: tuple[ClassRef, ...] = ()
    modifiers: frozenset[Modifier] = frozenset()
    parameters: tuple[TypeParamDef, ...] = ()


class TypeDef(BaseModel):
    """The canonical declaration of a named type.

    Super-types are held as references and dereferenced through a
    :class:`~typegraph.repository.DefinitionRepository`; a definition never
    embeds another definition for its ancestors.

    Definitions are immutable. Derived definitions are produced with
    ``model_copy(update=...)`` or the helpers in :mod:`typegraph.binding`.
    """

    model_config = ConfigDict(frozen=True)

    fully_qualified_name: str
    kind: Kind = Kind.CLASS
    modifiers: frozenset[Modifier] = frozenset()
    parameters: tuple[TypeParamDef, ...] = ()
    extends_list: tuple[ClassRef, ...] = ()
    implements_list: tuple[ClassRef, ...] = ()
    properties: tuple[Property, ...] = ()
    methods: tuple[Method, ...] = ()

    @property
    def simple_name(self) -> str:
        return self.fully_qualified_name.rpartition(".")[2]

    @property
    def package_name(self) -> str:
        return self.fully_qualified_name.rpartition(".")[0]

    @property
    def is_abstract(self) -> bool:
        return Modifier.ABSTRACT in self.modifiers

    @property
    def is_interface(self) -> bool:
        return self.kind is Kind.INTERFACE

    @property
    def is_enum(self) -> bool:
        return self.kind is Kind.ENUM

    @property
    def is_final(self) -> bool:
        return Modifier.FINAL in self.modifiers

    def to_reference(self, *arguments: TypeRef) -> ClassRef:
        """Return a reference to this type carrying this definition inline.

        Without explicit *arguments* the declared parameters are used, so a
        reference to ``List<E>`` is produced for a definition of ``List``.
        """
        if not arguments:
            arguments = tuple(p.to_reference() for p in self.parameters)
        return ClassRef(
            fully_qualified_name=self.fully_qualified_name,
            arguments=tuple(arguments),
            definition=self,
        )


# Resolve the forward references between references and definitions.
ClassRef.model_rebuild()
TypeParamDef.model_rebuild()
Property.model_rebuild()
Method.model_rebuild()
TypeDef.model_rebuild()
