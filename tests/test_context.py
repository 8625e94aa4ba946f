"""Tests for context.Context — haystack folding and attribute normalization."""
from datashield.context import EMPTY_CONTEXT, Context


def test_defaults_are_empty_and_secure():
    assert EMPTY_CONTEXT.haystack == ""
    assert EMPTY_CONTEXT.field_type == ""
    assert EMPTY_CONTEXT.secure is True
    assert EMPTY_CONTEXT.is_password is False


def test_from_field_joins_and_lowercases():
    ctx = Context.from_field(
        name="CardNumber",
        id="cc-NUM",
        class_name="form-control Payment",
        placeholder="1234 5678",
        aria_label="Credit Card",
    )
    assert ctx.haystack == "cardnumber cc-num form-control payment 1234 5678 credit card"
    assert ctx.mentions("credit", "nope")
    assert not ctx.mentions("password")


def test_from_field_none_values_are_empty():
    ctx = Context.from_field(name=None, placeholder="Email", field_type=None, secure=None)
    assert ctx.haystack == "   email "
    assert ctx.field_type == ""
    assert ctx.secure is True


def test_class_list_sequence_is_joined():
    ctx = Context.from_field(class_name=["Btn", "CVV-Input"])
    assert "btn cvv-input" in ctx.haystack


def test_field_type_is_normalized():
    assert Context.from_field(field_type=" PASSWORD ").is_password is True


def test_from_mapping_dom_aliases():
    ctx = Context.from_mapping(
        {
            "name": "upi",
            "className": "Pay",
            "aria-label": "Your UPI ID",
            "type": "text",
            "secure": "false",
            "data-testid": "ignored",
        }
    )
    assert ctx.haystack == "upi  pay  your upi id"
    assert ctx.field_type == "text"
    assert ctx.secure is False


def test_from_mapping_tolerates_garbage():
    assert Context.from_mapping(None) == EMPTY_CONTEXT
    assert Context.from_mapping(["not", "a", "mapping"]) == EMPTY_CONTEXT
    ctx = Context.from_mapping({"name": 42, "secure": object()})
    assert ctx.haystack.startswith("42")
    assert ctx.secure is True


def test_secure_coercion():
    assert Context(secure="http:").secure is False
    assert Context(secure="https:").secure is True
    assert Context(secure=0).secure is False
