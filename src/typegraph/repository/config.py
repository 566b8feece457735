# Copyright 2026 TypeGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the TypeGraph model configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import yaml

from typegraph.model.constants import JAVA_LANG_OBJECT

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".typegraph.yaml"

CyclePolicy = Literal["truncate", "error"]

_CYCLE_POLICIES: tuple[str, ...] = ("truncate", "error")


class ModelConfigError(Exception):
    """Raised when a model configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class ModelConfig:
    """Settings for one generation run.

    Attributes:
        root_type: Fully-qualified name of the universal root type. Hierarchy
            walks stop when they reach it.
        on_cycle: What a hierarchy walk does on a cyclic super-type graph:
            ``"truncate"`` stops at the repeated type and logs a warning,
            ``"error"`` raises :class:`~typegraph.analysis.HierarchyCycleError`.
    """

    root_type: str = JAVA_LANG_OBJECT
    on_cycle: CyclePolicy = "truncate"

    def __post_init__(self) -> None:
        if not self.root_type:
            raise ModelConfigError("root-type must be a non-empty string")
        if self.on_cycle not in _CYCLE_POLICIES:
            raise ModelConfigError(
                f"on-cycle must be one of {', '.join(_CYCLE_POLICIES)}, got '{self.on_cycle}'"
            )


def find_model_config(directory: Path) -> ModelConfig:
    """Return the configuration for *directory*.

    Loads ``directory / CONFIG_FILE_NAME`` when that file exists and falls
    back to the default configuration otherwise.

    Raises:
        ModelConfigError: If the file exists but is invalid.
    """
    config_path = directory / CONFIG_FILE_NAME
    if not config_path.exists():
        return ModelConfig()
    return load_model_config(config_path)


def load_model_config(path: Path) -> ModelConfig:
    """Load and parse a TypeGraph configuration file.

    Args:
        path: Path to the `.typegraph.yaml` file.

    Returns:
        A ModelConfig instance populated from the file.

    Raises:
        ModelConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ModelConfigError(f"Model config file not found: {path}") from None
    except OSError as exc:
        raise ModelConfigError(f"Cannot read model config file: {exc}") from exc

    return _parse_model_config(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"root-type", "on-cycle"})


def _parse_model_config(text: str, source_label: str = "<string>") -> ModelConfig:
    """Parse model config YAML text into a ModelConfig.

    An empty document yields the default configuration.

    Raises:
        ModelConfigError: If the YAML is invalid or a field has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ModelConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ModelConfig()

    if not isinstance(data, dict):
        raise ModelConfigError(f"{source_label}: model config must be a YAML mapping")

    unknown = sorted(str(k) for k in data if k not in _KNOWN_KEYS)
    if unknown:
        raise ModelConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    defaults = ModelConfig()
    root_type = _optional_string(data, "root-type", source_label) or defaults.root_type
    on_cycle = _optional_string(data, "on-cycle", source_label) or defaults.on_cycle

    try:
        return ModelConfig(root_type=root_type, on_cycle=on_cycle)  # type: ignore[arg-type]
    except ModelConfigError as exc:
        raise ModelConfigError(f"{source_label}: {exc}") from exc


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    """Extract an optional string field from a mapping, raising ModelConfigError on a non-string."""
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise ModelConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value
