from __future__ import annotations

from datashield.policy.loader import (
    POLICY_DEFAULTS,
    PolicyError,
    load_policy,
    shield_policy_from_dict,
    validate_policy,
)
from datashield.policy.model import ShieldPolicy

__all__ = [
    "POLICY_DEFAULTS",
    "PolicyError",
    "ShieldPolicy",
    "load_policy",
    "shield_policy_from_dict",
    "validate_policy",
]
