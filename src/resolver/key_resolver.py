"""Country allow/deny resolution for /resolve/user/input."""

from __future__ import annotations

import logging
from typing import Optional, Set

from ..utils.config_loader import ServiceSettings
from .base import (
    OUTCOME_BLOCKED,
    OUTCOME_COUNTRY,
    OUTCOME_DEFAULT,
    PhoneParser,
    Resolution,
    UserInputRequest,
)
from .errors import MissingField
from .normalizer import normalize_default_key, normalize_input, parse_keys

logger = logging.getLogger("country_service")


def validate_user_input(request: UserInputRequest) -> None:
    """Reject requests that must never reach resolution.

    Raises:
        MissingField: If input is blank, or neither key list is supplied.
    """
    if not isinstance(request.input, str) or not request.input.strip():
        raise MissingField("input")

    if not request.validkeys and not request.notallowedkeys:
        raise MissingField(
            "validkeys or notallowedkeys",
            "At least one of validkeys or notallowedkeys is required",
        )


def resolve_country(number: str, parser: PhoneParser) -> Optional[str]:
    """Return the lowercase country code for a normalized number, or None.

    Unparseable and invalid numbers both count as "country unknown".
    """
    lookup = parser.lookup(number)
    if lookup is None:
        logger.debug(f"Could not parse {number!r}")
        return None
    if not lookup.valid or not lookup.country:
        logger.debug(f"No valid country for {number!r}")
        return None
    return lookup.country.lower()


def resolve_key(
    country: Optional[str],
    blocked: Set[str],
    allowed: Set[str],
    default_key: str,
    blocked_marker: str,
) -> Resolution:
    """Apply the deny, allow, default rules in that order."""
    if country and country in blocked:
        return Resolution(message=blocked_marker, outcome=OUTCOME_BLOCKED, country=country)
    if country and country in allowed:
        return Resolution(message=country, outcome=OUTCOME_COUNTRY, country=country)
    return Resolution(message=default_key, outcome=OUTCOME_DEFAULT, country=country)


def resolve_user_input(
    request: UserInputRequest,
    parser: PhoneParser,
    settings: ServiceSettings,
) -> Resolution:
    """Validate the request, resolve the number's country and pick the output key.

    Args:
        request: Raw query parameters.
        parser: Phone metadata capability.
        settings: Service settings (markers, defaults, channel prefixes).

    Returns:
        Resolution with the token to return.

    Raises:
        ResolutionError: If the request is malformed.
    """
    validate_user_input(request)

    default_key = normalize_default_key(request.defaultkey, settings.default_key)
    number = normalize_input(request.input, settings.channel_prefixes)
    country = resolve_country(number, parser)

    resolution = resolve_key(
        country,
        blocked=parse_keys(request.notallowedkeys),
        allowed=parse_keys(request.validkeys),
        default_key=default_key,
        blocked_marker=settings.blocked_marker,
    )
    logger.info(f"Resolved {number} (country={country}) -> {resolution.outcome}")
    return resolution
