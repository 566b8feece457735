# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Definition repository and run configuration for TypeGraph."""

from typegraph.repository.config import (
    CONFIG_FILE_NAME,
    CyclePolicy,
    ModelConfig,
    ModelConfigError,
    find_model_config,
    load_model_config,
)
from typegraph.repository.definitions import DefinitionRepository

__all__ = [
    "CONFIG_FILE_NAME",
    "CyclePolicy",
    "DefinitionRepository",
    "ModelConfig",
    "ModelConfigError",
    "find_model_config",
    "load_model_config",
]
