"""Tests for phone number and key-list normalization."""

import pytest

from src.resolver.errors import InvalidInput
from src.resolver.normalizer import (
    normalize_default_key,
    normalize_input,
    normalize_number,
    parse_keys,
    parse_numbers,
    strip_channel_prefix,
)


def test_normalize_input_trims_and_adds_plus() -> None:
    assert normalize_input("  923001234567 ") == "+923001234567"
    assert normalize_input("+14155550100") == "+14155550100"


def test_normalize_input_strips_whatsapp_prefix() -> None:
    assert normalize_input("whatsapp:+923001234567") == "+923001234567"
    assert normalize_input("WhatsApp:923001234567") == "+923001234567"


def test_normalize_input_keeps_prefix_when_not_configured() -> None:
    assert normalize_input("whatsapp:+1", prefixes=()) == "+whatsapp:+1"


@pytest.mark.parametrize("raw", ["", "   ", "whatsapp:", " whatsapp:  "])
def test_normalize_input_rejects_empty(raw: str) -> None:
    with pytest.raises(InvalidInput) as exc_info:
        normalize_input(raw)
    assert exc_info.value.message == "Invalid input: empty after normalization"


def test_strip_channel_prefix_only_at_start() -> None:
    assert strip_channel_prefix("+1whatsapp:", ["whatsapp:"]) == "+1whatsapp:"


def test_normalize_number_is_separator_invariant() -> None:
    """Formatted and bare forms of the same number compare equal."""
    assert normalize_number("+1 (415) 555-0100") == normalize_number("14155550100")
    assert normalize_number("+1\\415\\5550100") == "+14155550100"


def test_normalize_number_returns_none_for_unusable() -> None:
    assert normalize_number(None) is None
    assert normalize_number("") is None
    assert normalize_number(" - ( ) ") is None


def test_normalize_number_keeps_bare_plus() -> None:
    assert normalize_number("+") == "+"
    assert normalize_number(" ( + ) ") == "+"


def test_parse_keys_trims_lowercases_and_drops_empty() -> None:
    assert parse_keys(" PK, us ,,AE ,") == {"pk", "us", "ae"}


def test_parse_keys_absent_or_non_string() -> None:
    assert parse_keys(None) == set()
    assert parse_keys("") == set()
    assert parse_keys(["pk"]) == set()  # type: ignore[arg-type]


def test_parse_numbers_filters_unusable_entries() -> None:
    numbers = parse_numbers("+1 415 555 0100, ,(),923001234567")
    assert numbers == ["+14155550100", "+923001234567"]


def test_normalize_default_key() -> None:
    assert normalize_default_key("  XX ", "garbage") == "xx"
    assert normalize_default_key("   ", "garbage") == "garbage"
    assert normalize_default_key(None, "garbage") == "garbage"
