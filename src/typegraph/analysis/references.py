# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reference extraction: which types does a signature depend on.

Extraction follows generic arguments, member types, exception types and
parameter bounds, but it stops at the reference boundary: the definition a
reference points to (registered or inline) is never entered. The result is
what must be importable to use an element, not the full type universe
reachable from it.
"""

from __future__ import annotations

from typegraph.model.entities import Method, Property, TypeDef, TypeParamDef
from typegraph.model.types import ClassRef, PrimitiveRef, TypeParamRef, TypeRef

# ###############
# Public Interface
# ###############

Element = PrimitiveRef | ClassRef | TypeParamRef | Property | Method | TypeParamDef | TypeDef


def extract_references(element: Element) -> set[TypeRef]:
    """Return every type reference transitively reachable from *element*.

    - A reference contributes itself and the references of its generic
      arguments.
    - A property contributes the references of its declared type.
    - A method contributes its return type, exceptions, arguments, and the
      bounds of its generic parameters.
    - A type parameter contributes the references of its bounds.
    - A type definition contributes its super-types, parameter bounds,
      properties, and methods.
    """
    result: set[TypeRef] = set()
    _collect(element, result)
    return result


def extract_imports(element: Element) -> set[str]:
    """Return the fully-qualified names of all class types *element* depends on.

    Array dimensions and generic arguments are stripped; primitives and type
    parameters are never imported.
    """
    return {r.fully_qualified_name for r in extract_references(element) if isinstance(r, ClassRef)}


# ################
# Implementation
# ################


def _collect(element: Element, result: set[TypeRef]) -> None:
    """Add the references reachable from *element* to *result*."""
    if isinstance(element, ClassRef):
        if element in result:
            return
        result.add(element)
        for argument in element.arguments:
            _collect(argument, result)
    elif isinstance(element, PrimitiveRef | TypeParamRef):
        result.add(element)
    elif isinstance(element, Property):
        _collect(element.type, result)
    elif isinstance(element, Method):
        _collect(element.return_type, result)
        for exception in element.exceptions:
            _collect(exception, result)
        for argument in element.arguments:
            _collect(argument, result)
        for parameter in element.parameters:
            _collect(parameter, result)
    elif isinstance(element, TypeParamDef):
        for bound in element.bounds:
            _collect(bound, result)
    elif isinstance(element, TypeDef):
        for ref in (*element.extends_list, *element.implements_list):
            _collect(ref, result)
        for parameter in element.parameters:
            _collect(parameter, result)
        for prop in element.properties:
            _collect(prop, result)
        for method in element.methods:
            _collect(method, result)
    else:
        raise TypeError(f"Cannot extract references from {type(element).__name__}")
