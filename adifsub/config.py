"""Configuration utilities"""

import logging
from pathlib import Path
from typing import Any

import yaml

from adifsub.fields import DEFAULT_POLICY, FieldPolicy

_LOGGER = logging.getLogger(__name__)

# --- config ---
FIELDS_KEY = "fields"
EXTRA_FIELDS_KEY = "extra_fields"


def _field_list(config: dict[str, Any], key: str, path: Path) -> list[str] | None:
    """Read an optional list of field names from a config mapping"""
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'{key}' in {path} must be a list of field names")
    return value


def load_config(path: Path) -> dict[str, Any]:
    """Load a YAML config file"""
    if not path.exists():
        raise ValueError(f"Config file not found: {path}")

    with open(path, encoding="utf8") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return config


def load_policy(path: Path | None = None) -> FieldPolicy:
    """
    Build the field policy from a config file.

    `fields` replaces the default allow-list, `extra_fields` adds to it.
    Without a path the default allow-list is used.
    """
    if path is None:
        return DEFAULT_POLICY

    config = load_config(path)

    fields = _field_list(config, FIELDS_KEY, path)
    extra_fields = _field_list(config, EXTRA_FIELDS_KEY, path)

    policy = FieldPolicy(fields) if fields is not None else DEFAULT_POLICY
    if extra_fields:
        policy = policy.extend(extra_fields)

    _LOGGER.debug("Loaded %d unicode fields from %s", len(policy), path)
    return policy
