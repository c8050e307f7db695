from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


OUTCOME_BLOCKED = "blocked"
OUTCOME_ALLOWED = "allowed"
OUTCOME_COUNTRY = "country"
OUTCOME_DEFAULT = "default"


@dataclass(frozen=True)
class UserInputRequest:
    """Raw query parameters for /resolve/user/input.

    Attributes:
        input: Phone number as received (may carry a channel prefix).
        validkeys: Comma-separated allowed country codes.
        notallowedkeys: Comma-separated blocked country codes.
        defaultkey: Fallback token when no rule matches.
    """

    input: Optional[str] = None
    validkeys: Optional[str] = None
    notallowedkeys: Optional[str] = None
    defaultkey: Optional[str] = None


@dataclass(frozen=True)
class WhitelistRequest:
    """Raw query parameters for /resolve/number/whitelist.

    Attributes:
        input: Phone number to check.
        allowednumbers: Comma-separated list of allowed phone numbers.
        defaultkey: Token returned when the number is not listed.
    """

    input: Optional[str] = None
    allowednumbers: Optional[str] = None
    defaultkey: Optional[str] = None


@dataclass(frozen=True)
class CountryLookup:
    """Parser output for a single phone number.

    Attributes:
        country: Uppercase region code reported by the metadata library, if any.
        valid: Whether the number is valid for that region.
    """

    country: Optional[str]
    valid: bool


@dataclass(frozen=True)
class Resolution:
    """The single output token produced for a request.

    Attributes:
        message: Token returned to the caller.
        outcome: Which rule produced the token (blocked, allowed, country, default).
        country: Lowercase country code resolved from the input, if any.
    """

    message: str
    outcome: str
    country: Optional[str] = None


class PhoneParser(ABC):
    """Abstract phone-number metadata capability."""

    @abstractmethod
    def lookup(self, number: str) -> Optional[CountryLookup]:
        """Parse a normalized number; return None when it cannot be parsed."""
        raise NotImplementedError
