"""Configuration file loading (kueueleuleu.yaml)."""

import dataclasses
import os

import yaml

from kueueleuleu.pacts.errors import ConfigError
from kueueleuleu.pacts.types import DEFAULT_CONFIG, SequencingConfig

# Config file key → SequencingConfig field
CONFIG_KEYS = {
    "entrypointImage": "entrypoint_image",
    "prepareContainerName": "prepare_container_name",
    "annotationKey": "annotation_key",
    "annotationValue": "annotation_value",
}


def load_config(path: str, warnings: list[str] | None = None) -> SequencingConfig:
    """Load kueueleuleu.yaml, or return the defaults if it doesn't exist."""
    if not os.path.exists(path):
        return DEFAULT_CONFIG
    with open(path, encoding="utf-8") as f:
        try:
            cfg = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: cannot parse YAML: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(cfg).__name__}")

    overrides = {}
    for key, val in cfg.items():
        if key not in CONFIG_KEYS:
            if warnings is not None:
                warnings.append(f"{path}: unknown key '{key}' — ignored")
            continue
        if not isinstance(val, str) or not val:
            raise ConfigError(f"{path}: '{key}' must be a non-empty string")
        overrides[CONFIG_KEYS[key]] = val
    return dataclasses.replace(DEFAULT_CONFIG, **overrides)
