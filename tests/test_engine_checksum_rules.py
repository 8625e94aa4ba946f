"""Tests for engine.checksum and engine.rules — Luhn and the ordered rule table."""
import pytest

from datashield.context import Context
from datashield.engine import Category, CategoryMode, luhn_valid
from datashield.engine.rules import RULES, SignalKind, has_valid_card
from datashield.engine.types import Assessment, Tier


def _rule(name):
    return next(r for r in RULES if r.name == name)


# ── luhn_valid ────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "digits",
    ["4111111111111111", "5500000000000004", "378282246310005", "6011111111111117", "79927398713"],
)
def test_luhn_accepts_valid_numbers(digits):
    assert luhn_valid(digits) is True


@pytest.mark.parametrize("digits", ["4111111111111112", "4000123456789011", "1234567812345678"])
def test_luhn_rejects_invalid_numbers(digits):
    assert luhn_valid(digits) is False


@pytest.mark.parametrize("digits", ["", "4111 1111 1111 1111", "41111111abc11111", "４１１１"])
def test_luhn_rejects_non_digit_input(digits):
    assert luhn_valid(digits) is False


def test_has_valid_card_strips_separators():
    assert has_valid_card("4111-1111-1111-1111") is True
    assert has_valid_card("4111 1111 1111 1112") is False
    assert has_valid_card("no digits here") is False


# ── Rule table ────────────────────────────────────────────────────

def test_rule_order_is_fixed():
    assert [r.name for r in RULES] == [
        "credit_card",
        "national_id",
        "secret_token",
        "tax_id",
        "payment_handle",
        "email",
        "phone",
        "security_code",
        "high_risk_label",
        "medium_risk_label",
        "insecure_transport",
    ]


def test_rule_scores():
    scores = {r.name: r.score for r in RULES}
    assert scores == {
        "credit_card": 80,
        "national_id": 75,
        "secret_token": 85,
        "tax_id": 50,
        "payment_handle": 40,
        "email": 35,
        "phone": 35,
        "security_code": 60,
        "high_risk_label": 30,
        "medium_risk_label": 15,
        "insecure_transport": 10,
    }


def test_context_rules_are_tagged():
    context_rules = {r.name for r in RULES if r.kind is SignalKind.CONTEXT}
    assert context_rules == {"high_risk_label", "medium_risk_label", "insecure_transport"}


def test_rule_names_are_unique():
    names = [r.name for r in RULES]
    assert len(names) == len(set(names))


# ── Category modes ────────────────────────────────────────────────

def test_unset_mode_is_first_match_wins():
    email = _rule("email")
    assert email.next_category("") == "Email Address"
    assert email.next_category("UPI ID") == "UPI ID"


def test_override_mode_always_replaces():
    code = _rule("security_code")
    assert code.mode is CategoryMode.OVERRIDE
    assert code.next_category("Credit Card") == "CVV/CVC"


def test_secret_replaces_only_national_id():
    secret = _rule("secret_token")
    assert secret.next_category("") == Category.SECRET.value
    assert secret.next_category("Aadhaar Number") == Category.SECRET.value
    assert secret.next_category("Credit Card") == "Credit Card"


def test_boosts_never_touch_category():
    for name in ("high_risk_label", "medium_risk_label", "insecure_transport"):
        assert _rule(name).next_category("") == ""
        assert _rule(name).next_category("PAN Number") == "PAN Number"


def test_national_id_only_applies_when_uncategorized():
    national = _rule("national_id")
    assert national.applies("") is True
    assert national.applies("Credit Card") is False
    assert _rule("email").applies("Credit Card") is True


def test_security_code_needs_context():
    code = _rule("security_code")
    assert code.matcher("123", Context(haystack="cvv")) is True
    assert code.matcher("123", Context(haystack="comment")) is False
    assert code.matcher("12", Context(haystack="cvv")) is False


# ── Assessment / Tier ─────────────────────────────────────────────

def test_assessment_payload_and_reason():
    a = Assessment(score=90, tier=Tier.HIGH, category="CVV/CVC", reasons=("a", "b"))
    assert a.reason == "a, b"
    assert a.to_payload() == {"score": 90, "tier": "HIGH", "category": "CVV/CVC", "reasons": ["a", "b"]}
    assert a.is_at_least(Tier.MEDIUM)
    assert not Assessment(score=20, tier=Tier.LOW).is_at_least(Tier.MEDIUM)


def test_tier_parse():
    assert Tier.parse("high") is Tier.HIGH
    assert Tier.parse(" Medium ") is Tier.MEDIUM
    assert Tier.parse(1) is Tier.LOW
    assert Tier.parse(Tier.IGNORE) is Tier.IGNORE
    assert Tier.parse("bogus", default=Tier.MEDIUM) is Tier.MEDIUM
    with pytest.raises(ValueError):
        Tier.parse("bogus")
    with pytest.raises(ValueError):
        Tier.parse(True)
