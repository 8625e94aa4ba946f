"""Pattern table for the field risk evaluator.

Value patterns are tested against the text typed into a field; keyword sets
are tested against the lowercased field context (name, id, class,
placeholder, aria-label). ``\\d`` and ``\\b`` are ASCII-only and whitespace
includes the Unicode spaces, matching browser regex engines.
"""
from __future__ import annotations

import re
from typing import Tuple

_FLAGS = re.ASCII

# Whitespace as browsers define it for \s, which re.ASCII would narrow to
# ASCII only: NBSP and the Unicode space separators are common in pasted text.
_WS = r"[\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"

# Tier 1: high impact
CARD_CANDIDATE = re.compile(r"\b(?:\d[ -]*?){13,19}\b", _FLAGS)
CARD_SEPARATORS = re.compile(rf"(?:{_WS}|-)", _FLAGS)
CARD_MIN_DIGITS = 13
CARD_MAX_DIGITS = 19

NATIONAL_ID = re.compile(rf"\b\d{{4}}{_WS}?\d{{4}}{_WS}?\d{{4}}\b", _FLAGS)

# Stripe live keys, JWT, Google API keys, AWS access key ids, GitHub PATs, Slack tokens
SECRET_TOKEN = re.compile(
    r"\b(?:"
    r"sk_live_[0-9a-zA-Z]{24,}"
    r"|eyJ[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]{10,}"
    r"|AIza[0-9A-Za-z\-_]{30,40}"
    r"|AKIA[0-9A-Z]{16}"
    r"|ghp_[a-zA-Z0-9]{36}"
    r"|xox[baprs]-[a-zA-Z0-9-]{10,}"
    r")\b",
    _FLAGS,
)

SHORT_CODE = re.compile(r"\b\d{3,4}\b", _FLAGS)

# Tier 2: medium impact
TAX_ID = re.compile(r"\b[A-Z]{5}[0-9]{4}[A-Z]\b", _FLAGS)
PAYMENT_HANDLE = re.compile(r"\b[a-zA-Z0-9.\-_]{2,}@[a-zA-Z]{2,}\b", _FLAGS)
EMAIL = re.compile(r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b", _FLAGS)
# (123) 456-7890, 123-456-7890, +1 123 456 7890, ...
_SEP = rf"(?:[-.]|{_WS})?"
PHONE = re.compile(rf"(?:\b\+?\d{{1,3}}{_SEP})?\(?\d{{3}}\)?{_SEP}\d{{3}}{_SEP}\d{{4}}\b", _FLAGS)

# Context keywords
SECURITY_CODE_KEYWORDS: Tuple[str, ...] = ("cvv", "cvc", "security")
HIGH_RISK_KEYWORDS: Tuple[str, ...] = (
    "password", "pwd", "secret", "token", "key",
    "cvv", "cvc", "card", "debit", "credit",
)
MEDIUM_RISK_KEYWORDS: Tuple[str, ...] = ("email", "phone", "mobile", "pan", "upi", "bank", "account")


def contains_any(haystack: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in haystack for k in keywords)
