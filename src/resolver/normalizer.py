"""Phone number and key-list normalization."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Set

from .errors import InvalidInput

# Separators dropped before whitelist comparison
SEPARATORS_RE = re.compile(r"[\s\-\\()]")


def strip_channel_prefix(value: str, prefixes: Iterable[str]) -> str:
    """Remove a leading messaging-channel prefix such as "whatsapp:".

    Matching ignores case; only the first matching prefix is removed.
    """
    lowered = value.lower()
    for prefix in prefixes:
        if prefix and lowered.startswith(prefix.lower()):
            return value[len(prefix):]
    return value


def ensure_plus(value: str) -> str:
    return value if value.startswith("+") else f"+{value}"


def normalize_input(raw: str, prefixes: Iterable[str] = ("whatsapp:",)) -> str:
    """Normalize a raw phone number into an E.164 candidate for parsing.

    Args:
        raw: Phone number as received.
        prefixes: Channel prefixes to strip.

    Returns:
        Trimmed number starting with "+".

    Raises:
        InvalidInput: If nothing is left after trimming.
    """
    number = strip_channel_prefix(raw.strip(), prefixes).strip()
    if not number:
        raise InvalidInput()
    return ensure_plus(number)


def normalize_number(raw: Optional[str], prefixes: Iterable[str] = ("whatsapp:",)) -> Optional[str]:
    """Normalize a phone number for whitelist comparison.

    Whitespace, hyphens, backslashes and parentheses are removed so that
    "+1 (415) 555-0100" and "14155550100" compare equal.

    Returns:
        Normalized number, or None if nothing usable remains.
    """
    if not raw or not isinstance(raw, str):
        return None

    number = SEPARATORS_RE.sub("", strip_channel_prefix(raw.strip(), prefixes))
    if not number:
        return None
    return ensure_plus(number)


def parse_keys(keys: Optional[str]) -> Set[str]:
    """Split a comma-separated key list into a set of lowercase codes.

    Absent or non-string input yields an empty set.
    """
    if not keys or not isinstance(keys, str):
        return set()
    return {key.strip().lower() for key in keys.split(",") if key.strip()}


def parse_numbers(numbers: Optional[str], prefixes: Iterable[str] = ("whatsapp:",)) -> List[str]:
    """Split a comma-separated number list, normalizing and dropping unusable entries."""
    if not numbers or not isinstance(numbers, str):
        return []
    normalized = (normalize_number(number, prefixes) for number in numbers.split(","))
    return [number for number in normalized if number is not None]


def normalize_default_key(value: Optional[str], fallback: str) -> str:
    """Trim and lowercase a caller-supplied default key, falling back when blank."""
    if isinstance(value, str) and value.strip():
        return value.strip().lower()
    return fallback
