"""
Configuration Loader (``quote_config.loader``).

Responsibility
--------------
Loads a YAML configuration set and parses it into a frozen
``PricingConfiguration``.  Runtime callers go through
``quote_config.get_active_config()`` instead of calling this directly.

Invariants enforced
-------------------
* Parse errors raise ``InvalidPricingConfigError`` naming the source file
  and the offending key; no silent defaults for required fields.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing or ill-typed keys  -> ``InvalidPricingConfigError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from quote_config.schema import PricingConfiguration
from quote_kernel.domain.values import RoundingPolicy
from quote_kernel.exceptions import InvalidPricingConfigError

_ROUNDING_KEYS = ("money_scale", "quantity_scale", "fixed_quantity_scale")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def compute_checksum(data: dict[str, Any]) -> str:
    """SHA-256 of the canonical JSON serialization of ``data``."""
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()


def parse_rounding(data: Any, source: str) -> RoundingPolicy:
    """Parse the ``rounding`` mapping; omitted scales keep their defaults."""
    if data is None:
        return RoundingPolicy()
    if not isinstance(data, dict):
        raise InvalidPricingConfigError(source, "'rounding' must be a mapping")

    unknown = sorted(set(data) - set(_ROUNDING_KEYS))
    if unknown:
        raise InvalidPricingConfigError(
            source, f"unknown rounding keys: {', '.join(unknown)}"
        )
    try:
        return RoundingPolicy(**{k: data[k] for k in _ROUNDING_KEYS if k in data})
    except ValueError as e:
        raise InvalidPricingConfigError(source, str(e)) from e


def parse_configuration(data: dict[str, Any], source: str) -> PricingConfiguration:
    """Parse a whole configuration set from a dict."""
    if "config_id" not in data:
        raise InvalidPricingConfigError(source, "missing 'config_id'")
    version = data.get("version", 1)
    if not isinstance(version, int) or isinstance(version, bool) or version < 1:
        raise InvalidPricingConfigError(source, f"'version' must be a positive integer, got {version!r}")

    return PricingConfiguration(
        config_id=str(data["config_id"]),
        version=version,
        rounding=parse_rounding(data.get("rounding"), source),
        description=str(data.get("description", "")),
        checksum=compute_checksum(data),
    )


def load_configuration(path: Path) -> PricingConfiguration:
    """Load and parse one YAML configuration set."""
    return parse_configuration(load_yaml_file(path), str(path))
