# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generic binding and copy-on-write builders for type definitions."""

from typegraph.binding.builders import (
    fully_qualified_name_diff,
    modifiers_to_int,
    to_class_name,
    type_extends,
    type_generic_of,
    type_implements,
    unwrap_generic,
)
from typegraph.binding.generics import (
    Bindings,
    bind,
    bind_definition,
    bindings_for,
    get_parameter_definition,
    new_type_param_def,
    new_type_param_ref,
)

__all__ = [
    # Builders
    "type_generic_of",
    "unwrap_generic",
    "type_extends",
    "type_implements",
    "modifiers_to_int",
    "fully_qualified_name_diff",
    "to_class_name",
    # Generics
    "Bindings",
    "bind",
    "bind_definition",
    "bindings_for",
    "get_parameter_definition",
    "new_type_param_def",
    "new_type_param_ref",
]
