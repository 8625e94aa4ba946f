"""Field risk evaluator.

Classifies text typed or pasted into a web form field and maps it to a
discrete risk tier. Deterministic, pure, and cheap enough to run on every
(debounced) input event; callers decide what to do with the result.
"""
from __future__ import annotations

from datashield.engine.checksum import luhn_valid
from datashield.engine.evaluator import evaluate, tier_for_score
from datashield.engine.rules import RULES, CategoryMode, Rule, SignalKind
from datashield.engine.types import Assessment, Category, Tier

__all__ = [
    "Assessment",
    "Category",
    "CategoryMode",
    "RULES",
    "Rule",
    "SignalKind",
    "Tier",
    "evaluate",
    "luhn_valid",
    "tier_for_score",
]
