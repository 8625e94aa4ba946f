from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from datashield.context import EMPTY_CONTEXT, Context
from datashield.engine.rules import RULES, Rule
from datashield.engine.types import IGNORED, Assessment, Category, Tier

logger = logging.getLogger(__name__)

MIN_VALUE_LENGTH = 3
MAX_SCORE = 100
PASSWORD_SCORE = 90

# Lower bound (inclusive) of each tier, highest first.
TIER_THRESHOLDS = (
    (61, Tier.HIGH),
    (31, Tier.MEDIUM),
    (15, Tier.LOW),
)

PASSWORD_ASSESSMENT = Assessment(
    score=PASSWORD_SCORE,
    tier=Tier.HIGH,
    category=Category.PASSWORD.value,
    reasons=("Password field detected",),
)


def tier_for_score(score: int) -> Tier:
    for floor, tier in TIER_THRESHOLDS:
        if score >= floor:
            return tier
    return Tier.IGNORE


def _matches(rule: Rule, value: str, context: Context) -> bool:
    try:
        return bool(rule.matcher(value, context))
    except (re.error, RecursionError, ValueError, TypeError) as exc:
        # The value itself is never logged.
        logger.debug("Signal failed, treating as no match", extra={"rule": rule.name, "error": type(exc).__name__})
        return False


def evaluate(value: Optional[str], context: Optional[Context] = None, *, rules: Sequence[Rule] = RULES) -> Assessment:
    """Score ``value`` typed into a field described by ``context``.

    Pure and deterministic: no I/O and no state carried between calls.
    Never raises for odd input; a failing rule simply does not match.
    """
    if not isinstance(value, str) or len(value) < MIN_VALUE_LENGTH:
        return IGNORED

    ctx = context if isinstance(context, Context) else EMPTY_CONTEXT
    if ctx.is_password:
        return PASSWORD_ASSESSMENT

    score = 0
    category = ""
    reasons: List[str] = []
    for rule in rules:
        if not rule.applies(category):
            continue
        if not _matches(rule, value, ctx):
            continue
        score += rule.score
        category = rule.next_category(category)
        if rule.reason:
            reasons.append(rule.reason)

    score = min(MAX_SCORE, score)
    if score > 0 and not category:
        category = Category.GENERIC.value

    return Assessment(score=score, tier=tier_for_score(score), category=category, reasons=tuple(reasons))
