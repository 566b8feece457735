# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type model for TypeGraph (references, definitions, members)."""

from typegraph.model.entities import (
    Kind,
    Method,
    Modifier,
    Property,
    TypeDef,
    TypeParamDef,
)
from typegraph.model.types import (
    ClassRef,
    PrimitiveRef,
    TypeParamRef,
    TypeRef,
)

__all__ = [
    # References
    "PrimitiveRef",
    "ClassRef",
    "TypeParamRef",
    "TypeRef",
    # Definitions
    "Modifier",
    "Kind",
    "TypeParamDef",
    "Property",
    "Method",
    "TypeDef",
]
