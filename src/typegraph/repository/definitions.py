# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry resolving type references to their canonical definitions.

A :class:`DefinitionRepository` is the context object of one generation run.
The front end registers every definition it discovers; the analysis and
binding helpers dereference :class:`~typegraph.model.ClassRef` values through
it. Cross-references between definitions are held as names, which is what
allows cyclic type graphs (``A extends B``, ``B`` has a property of type
``A``) without cyclic ownership.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from typegraph.model.entities import TypeDef
from typegraph.model.types import ClassRef, PrimitiveRef, TypeParamRef, TypeRef
from typegraph.repository.config import ModelConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DefinitionRepository:
    """Thread-safe mapping from fully-qualified name to :class:`TypeDef`.

    Registration of a name that is already present replaces the previous
    definition (last writer wins). Resolution misses are reported as ``None``.
    """

    def __init__(
        self,
        definitions: Iterable[TypeDef] = (),
        *,
        config: ModelConfig | None = None,
    ) -> None:
        self._config = config or ModelConfig()
        self._definitions: dict[str, TypeDef] = {}
        self._lock = threading.RLock()
        self.register_all(definitions)

    @property
    def config(self) -> ModelConfig:
        return self._config

    @property
    def root_type(self) -> str:
        """Fully-qualified name of the universal root type."""
        return self._config.root_type

    def register(self, definition: TypeDef) -> TypeDef:
        """Insert or replace the definition keyed by its fully-qualified name."""
        name = definition.fully_qualified_name
        with self._lock:
            previous = self._definitions.get(name)
            self._definitions[name] = definition
        if previous is not None and previous != definition:
            logger.debug("Replaced definition of '%s'", name)
        return definition

    def register_all(self, definitions: Iterable[TypeDef]) -> None:
        """Register each of *definitions* in order."""
        for definition in definitions:
            self.register(definition)

    def get_definition(self, fully_qualified_name: str) -> TypeDef | None:
        """Return the registered definition for a name, or None."""
        with self._lock:
            return self._definitions.get(fully_qualified_name)

    def resolve(self, reference: TypeRef) -> TypeDef | None:
        """Dereference *reference* into its definition.

        A class reference is looked up by name; when the registry has no entry
        the inline definition carried by the reference (if any) is returned.
        Primitive and type-parameter references never resolve.
        """
        if isinstance(reference, ClassRef):
            found = self.get_definition(reference.fully_qualified_name)
            if found is None:
                found = reference.definition
            return found
        if isinstance(reference, PrimitiveRef | TypeParamRef):
            return None
        raise TypeError(f"Not a type reference: {reference!r}")

    def definitions(self) -> list[TypeDef]:
        """Return a snapshot of all registered definitions in registration order."""
        with self._lock:
            return list(self._definitions.values())

    def clear(self) -> None:
        """Remove every registered definition."""
        with self._lock:
            self._definitions.clear()

    def __contains__(self, fully_qualified_name: object) -> bool:
        with self._lock:
            return fully_qualified_name in self._definitions

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)

    def __iter__(self) -> Iterator[TypeDef]:
        return iter(self.definitions())
