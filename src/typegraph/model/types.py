# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type reference representations for the TypeGraph model.

A reference describes a *usage* of a type at some site (a field type, a
method argument, a generic argument). References are immutable values with
structural equality.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

if TYPE_CHECKING:
    from typegraph.model.entities import TypeDef

# ###############
# Public Interface
# ###############


class PrimitiveRef(BaseModel):
    """Reference to a primitive type such as ``int`` or ``boolean``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    name: str
    dimensions: int = _Field(default=0, ge=0)

    @property
    def is_primitive(self) -> bool:
        return True

    @property
    def is_array(self) -> bool:
        return self.dimensions > 0

    @property
    def is_parameter(self) -> bool:
        return False

    def with_dimensions(self, dimensions: int) -> PrimitiveRef:
        """Return a copy of this reference with a different array dimension count."""
        return PrimitiveRef(name=self.name, dimensions=dimensions)

    def __str__(self) -> str:
        return self.name + "[]" * self.dimensions


class ClassRef(BaseModel):
    """Reference to a class, interface, or enum, possibly parameterized.

    Attributes:
        fully_qualified_name: Dotted name of the referenced type.
        dimensions: Array dimension count.
        arguments: Ordered generic arguments.
        definition: Optional inline definition supplied by the front end. It is
            used only as a fallback when the repository has no entry and it
            never takes part in equality or hashing.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["class"] = "class"
    fully_qualified_name: str
    dimensions: int = _Field(default=0, ge=0)
    arguments: tuple[TypeRef, ...] = ()
    definition: TypeDef | None = _Field(default=None, repr=False)

    @property
    def is_primitive(self) -> bool:
        return False

    @property
    def is_array(self) -> bool:
        return self.dimensions > 0

    @property
    def is_parameter(self) -> bool:
        return False

    @property
    def simple_name(self) -> str:
        return self.fully_qualified_name.rpartition(".")[2]

    @property
    def package_name(self) -> str:
        return self.fully_qualified_name.rpartition(".")[0]

    def with_dimensions(self, dimensions: int) -> ClassRef:
        """Return a copy of this reference with a different array dimension count."""
        return ClassRef(
            fully_qualified_name=self.fully_qualified_name,
            dimensions=dimensions,
            arguments=self.arguments,
            definition=self.definition,
        )

    def with_arguments(self, *arguments: TypeRef) -> ClassRef:
        """Return a copy of this reference with its generic arguments replaced."""
        return self.model_copy(update={"arguments": tuple(arguments)})

    def _key(self) -> tuple[object, ...]:
        return (self.kind, self.fully_qualified_name, self.dimensions, self.arguments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassRef):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        text = self.fully_qualified_name
        if self.arguments:
            text += "<" + ", ".join(str(a) for a in self.arguments) + ">"
        return text + "[]" * self.dimensions


class TypeParamRef(BaseModel):
    """Reference to a declared type parameter, e.g. the ``T`` in ``List<T>``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["parameter"] = "parameter"
    name: str
    dimensions: int = _Field(default=0, ge=0)

    @property
    def is_primitive(self) -> bool:
        return False

    @property
    def is_array(self) -> bool:
        return self.dimensions > 0

    @property
    def is_parameter(self) -> bool:
        return True

    def with_dimensions(self, dimensions: int) -> TypeParamRef:
        """Return a copy of this reference with a different array dimension count."""
        return TypeParamRef(name=self.name, dimensions=dimensions)

    def __str__(self) -> str:
        return self.name + "[]" * self.dimensions


# A type reference: a primitive, a class or interface, or a type parameter.
# The `kind` discriminator keeps matching on variants exhaustive.
TypeRef = Annotated[
    PrimitiveRef | ClassRef | TypeParamRef,
    _Field(discriminator="kind"),
]
