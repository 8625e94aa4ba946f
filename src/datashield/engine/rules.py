# src/datashield/engine/rules.py
"""Ordered signal rules for the field risk evaluator.

Each rule is one independent detection signal. Rules run in list order and
every match adds its score; the category label follows the rule's
``CategoryMode`` so the tie-break policy is readable straight off RULES.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Pattern, Tuple

from datashield.context import Context
from datashield.engine import patterns as p
from datashield.engine.checksum import luhn_valid
from datashield.engine.types import Category

Matcher = Callable[[str, Context], bool]


class SignalKind(str, Enum):
    VALUE = "value"        # tests the typed text
    CONTEXT = "context"    # tests field metadata only


class CategoryMode(str, Enum):
    UNSET = "unset"                        # first match wins
    OVERRIDE = "override"                  # always replaces
    OVER_NATIONAL_ID = "over_national_id"  # replaces nothing or a national ID
    NONE = "none"                          # score only


@dataclass(frozen=True)
class Rule:
    name: str
    kind: SignalKind
    matcher: Matcher
    score: int
    category: Optional[Category] = None
    mode: CategoryMode = CategoryMode.UNSET
    reason: str = ""
    only_if_uncategorized: bool = False

    def applies(self, category: str) -> bool:
        return not (self.only_if_uncategorized and category)

    def next_category(self, current: str) -> str:
        if self.category is None or self.mode is CategoryMode.NONE:
            return current
        if self.mode is CategoryMode.OVERRIDE:
            return self.category.value
        if self.mode is CategoryMode.OVER_NATIONAL_ID:
            if not current or current == Category.NATIONAL_ID.value:
                return self.category.value
            return current
        return current or self.category.value


def _search(pattern: Pattern[str]) -> Matcher:
    def match(value: str, context: Context) -> bool:
        return pattern.search(value) is not None
    return match


def has_valid_card(value: str, context: Optional[Context] = None) -> bool:
    """True when any 13-19 digit run (spaces/hyphens allowed) passes Luhn."""
    for m in p.CARD_CANDIDATE.finditer(value):
        digits = p.CARD_SEPARATORS.sub("", m.group(0))
        if p.CARD_MIN_DIGITS <= len(digits) <= p.CARD_MAX_DIGITS and luhn_valid(digits):
            return True
    return False


def _security_code(value: str, context: Context) -> bool:
    return context.mentions(*p.SECURITY_CODE_KEYWORDS) and p.SHORT_CODE.search(value) is not None


def _high_risk_label(value: str, context: Context) -> bool:
    return context.mentions(*p.HIGH_RISK_KEYWORDS)


def _medium_risk_label(value: str, context: Context) -> bool:
    return context.mentions(*p.MEDIUM_RISK_KEYWORDS)


def _insecure_transport(value: str, context: Context) -> bool:
    return not context.secure


RULES: Tuple[Rule, ...] = (
    Rule("credit_card", SignalKind.VALUE, has_valid_card, 80,
         Category.CREDIT_CARD, reason="Likely credit card pattern matches"),
    Rule("national_id", SignalKind.VALUE, _search(p.NATIONAL_ID), 75,
         Category.NATIONAL_ID, reason="Aadhaar format detected", only_if_uncategorized=True),
    Rule("secret_token", SignalKind.VALUE, _search(p.SECRET_TOKEN), 85,
         Category.SECRET, CategoryMode.OVER_NATIONAL_ID, reason="High-entropy secret pattern detected"),
    Rule("tax_id", SignalKind.VALUE, _search(p.TAX_ID), 50,
         Category.TAX_ID, reason="Tax ID format detected"),
    Rule("payment_handle", SignalKind.VALUE, _search(p.PAYMENT_HANDLE), 40, Category.PAYMENT_HANDLE),
    Rule("email", SignalKind.VALUE, _search(p.EMAIL), 35, Category.EMAIL),
    Rule("phone", SignalKind.VALUE, _search(p.PHONE), 35, Category.PHONE),
    Rule("security_code", SignalKind.VALUE, _security_code, 60,
         Category.CVV, CategoryMode.OVERRIDE, reason="CVV pattern in security context"),
    Rule("high_risk_label", SignalKind.CONTEXT, _high_risk_label, 30,
         mode=CategoryMode.NONE, reason="Sensitive field label found"),
    # TODO: confirm with product whether this boost should carry a reason like high_risk_label does
    Rule("medium_risk_label", SignalKind.CONTEXT, _medium_risk_label, 15, mode=CategoryMode.NONE),
    Rule("insecure_transport", SignalKind.CONTEXT, _insecure_transport, 10,
         mode=CategoryMode.NONE, reason="Page is not HTTPS"),
)
