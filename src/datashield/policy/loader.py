# src/datashield/policy/loader.py
"""Shield policy loader: YAML/JSON parsing, default merge and validation.

A policy file only needs the keys it wants to change; everything else
comes from POLICY_DEFAULTS. Non-strict loading never fails: a bad file
yields the defaults and a logged warning so screening keeps running.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from datashield.config import Settings
from datashield.engine.types import Tier
from datashield.policy.model import DEFAULT_EXCLUDED_FIELD_TYPES, ShieldPolicy

logger = logging.getLogger(__name__)


class PolicyError(ValueError):
    """Raised by strict loading when a policy file cannot be used."""


def _defaults() -> Dict[str, Any]:
    warn_tier = Tier.parse(Settings.WARN_TIER, default=Tier.MEDIUM)
    # IGNORE would warn on every field
    if warn_tier is Tier.IGNORE:
        warn_tier = Tier.MEDIUM
    return {
        "policy_id": "default",
        "enabled": True,
        "warn_tier": warn_tier.name,
        "excluded_field_types": list(DEFAULT_EXCLUDED_FIELD_TYPES),
    }


POLICY_DEFAULTS: Dict[str, Any] = _defaults()


def _merge_defaults(data: Dict, defaults: Dict) -> Dict:
    """Deep-merge data over defaults."""
    result = dict(defaults)
    for key, value in data.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_defaults(value, result[key])
        else:
            result[key] = value
    return result


def _parse(path: str, raw: str) -> Any:
    if path.endswith(".json"):
        return json.loads(raw)
    return yaml.safe_load(raw)


def validate_policy(policy: Dict[str, Any]) -> List[str]:
    """Validate a raw policy dict.

    Returns list of error strings (empty = valid).
    """
    if not isinstance(policy, dict):
        return ["Policy must be a mapping"]

    errors = []
    if not str(policy.get("policy_id") or "").strip():
        errors.append("Missing required field: policy_id")

    if not isinstance(policy.get("enabled", True), bool):
        errors.append("enabled must be a boolean")

    try:
        tier = Tier.parse(policy.get("warn_tier", "MEDIUM"))
    except ValueError as exc:
        errors.append(f"warn_tier: {exc}")
    else:
        if tier is Tier.IGNORE:
            errors.append("warn_tier must be LOW, MEDIUM or HIGH")

    excluded = policy.get("excluded_field_types", [])
    if not isinstance(excluded, list) or not all(isinstance(t, str) for t in excluded):
        errors.append("excluded_field_types must be a list of strings")

    unknown = sorted(set(policy) - set(POLICY_DEFAULTS))
    if unknown:
        errors.append(f"Unknown fields: {', '.join(unknown)}")

    return errors


def shield_policy_from_dict(policy: Optional[Dict[str, Any]]) -> ShieldPolicy:
    """Create a ShieldPolicy from a raw dict, falling back to defaults.

    Unknown or invalid input is logged and replaced by the default policy.
    """
    if not isinstance(policy, dict):
        return ShieldPolicy(**POLICY_DEFAULTS)

    merged = _merge_defaults(policy, POLICY_DEFAULTS)
    errors = validate_policy(merged)
    if errors:
        logger.warning("Invalid shield policy, using defaults", extra={"errors": errors})
        return ShieldPolicy(**POLICY_DEFAULTS)
    try:
        return ShieldPolicy(**merged)
    except ValidationError as exc:
        logger.warning("Invalid shield policy, using defaults", extra={"errors": [str(exc)]})
        return ShieldPolicy(**POLICY_DEFAULTS)


def load_policy(path: Optional[str] = None, *, strict: bool = False) -> ShieldPolicy:
    """Load a shield policy from a YAML or JSON file.

    ``path`` defaults to Settings.POLICY_PATH. A missing path yields the
    defaults. With ``strict=True`` read, parse and validation problems raise
    PolicyError instead of falling back.
    """
    path = path if path is not None else Settings.POLICY_PATH
    if not path or not os.path.exists(path):
        if path and strict:
            raise PolicyError(f"Policy file not found: {path}")
        return ShieldPolicy(**POLICY_DEFAULTS)

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        if strict:
            raise PolicyError(f"Could not read policy {path}: {exc}") from exc
        logger.warning("Could not read policy file, using defaults", extra={"path": path})
        return ShieldPolicy(**POLICY_DEFAULTS)

    try:
        data = _parse(path, raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        if strict:
            raise PolicyError(f"Could not parse policy {path}: {exc}") from exc
        logger.warning("Could not parse policy file, using defaults", extra={"path": path})
        return ShieldPolicy(**POLICY_DEFAULTS)

    if data is None:
        data = {}
    if strict:
        merged = _merge_defaults(data, POLICY_DEFAULTS) if isinstance(data, dict) else data
        errors = validate_policy(merged)
        if errors:
            raise PolicyError(f"Invalid policy {path}: {'; '.join(errors)}")
        try:
            return ShieldPolicy(**merged)
        except ValidationError as exc:
            raise PolicyError(f"Invalid policy {path}: {exc}") from exc

    return shield_policy_from_dict(data)
