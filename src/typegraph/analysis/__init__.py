# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural queries over the type model (hierarchy, references, predicates)."""

from typegraph.analysis.hierarchy import (
    HierarchyCycleError,
    all_methods,
    all_properties,
    has_method,
    has_property,
    is_abstract,
    is_concrete,
    is_instance_of,
    unroll_hierarchy,
    visit_parents,
)
from typegraph.analysis.predicates import (
    is_array,
    is_boolean,
    is_collection,
    is_list,
    is_map,
    is_optional,
    is_optional_double,
    is_optional_int,
    is_optional_long,
    is_primitive,
    is_set,
)
from typegraph.analysis.references import extract_imports, extract_references

__all__ = [
    # Hierarchy
    "HierarchyCycleError",
    "unroll_hierarchy",
    "visit_parents",
    "has_method",
    "has_property",
    "all_properties",
    "all_methods",
    "is_abstract",
    "is_concrete",
    "is_instance_of",
    # References
    "extract_references",
    "extract_imports",
    # Predicates
    "is_primitive",
    "is_array",
    "is_boolean",
    "is_optional",
    "is_optional_int",
    "is_optional_double",
    "is_optional_long",
    "is_map",
    "is_list",
    "is_set",
    "is_collection",
]
