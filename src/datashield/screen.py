from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from datashield.context import EMPTY_CONTEXT, Context
from datashield.engine import Assessment, Tier, evaluate
from datashield.policy import ShieldPolicy, load_policy
from datashield.utils.stable import hash_suffix

logger = logging.getLogger(__name__)

Decision = Literal["WARN", "CLEAR", "SKIP"]
Severity = Literal["high", "medium"]


@dataclass(frozen=True)
class ScreenResult:
    decision: Decision
    reason: str
    assessment: Optional[Assessment] = None
    severity: Optional[Severity] = None
    policy_id: str = "default"
    policy_fingerprint: str = ""

    @property
    def warn(self) -> bool:
        return self.decision == "WARN"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "decision": self.decision,
            "reason": self.reason,
            "severity": self.severity,
            "assessment": self.assessment.to_payload() if self.assessment else None,
            "policy": {"id": self.policy_id, "fingerprint": hash_suffix(self.policy_fingerprint)},
        }


def screen(
    value: Optional[str],
    context: Optional[Context] = None,
    policy: Optional[ShieldPolicy] = None,
) -> ScreenResult:
    """Decide whether the observer should warn about ``value``.

    Returns:
      SKIP  - policy disabled, non-text field type, or empty value
      WARN  - assessment tier at or above policy.warn_tier
      CLEAR - anything else; the caller should drop a stale warning
    """
    if policy is None:
        policy = load_policy()
    ctx = context if isinstance(context, Context) else EMPTY_CONTEXT
    meta = {"policy_id": policy.policy_id, "policy_fingerprint": policy.fingerprint()}

    if not policy.enabled:
        return ScreenResult("SKIP", "Screening disabled by policy", **meta)
    if policy.excludes(ctx.field_type):
        return ScreenResult("SKIP", f"Field type '{ctx.field_type}' is not screened", **meta)
    if not value:
        return ScreenResult("SKIP", "Empty value", **meta)

    assessment = evaluate(value, ctx)
    if assessment.is_at_least(policy.warn_tier):
        severity: Severity = "high" if assessment.tier is Tier.HIGH else "medium"
        logger.info(
            "Sensitive input detected",
            extra={"category": assessment.category, "score": assessment.score, "tier": assessment.tier.name},
        )
        return ScreenResult(
            "WARN",
            f"{assessment.category} detected",
            assessment=assessment,
            severity=severity,
            **meta,
        )
    return ScreenResult("CLEAR", f"Below {policy.warn_tier.name} threshold", assessment=assessment, **meta)
