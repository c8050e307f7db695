"""Explicit number whitelist check for /resolve/number/whitelist."""

from __future__ import annotations

import logging

from ..utils.config_loader import ServiceSettings
from .base import OUTCOME_ALLOWED, OUTCOME_DEFAULT, Resolution, WhitelistRequest
from .errors import InvalidInput, MissingField, NoValidCandidates
from .normalizer import normalize_default_key, normalize_number, parse_numbers

logger = logging.getLogger("country_service")


def resolve_whitelist(request: WhitelistRequest, settings: ServiceSettings) -> Resolution:
    """Return the allowed marker if the input number is whitelisted, else the default key.

    Numbers are compared as strings after separator removal; no metadata
    lookup is involved.

    Raises:
        MissingField: If input, allowednumbers or the default key is blank.
        InvalidInput: If the input number is empty after normalization.
        NoValidCandidates: If no allowed number survives normalization.
    """
    if not isinstance(request.input, str) or not request.input.strip():
        raise MissingField("input")

    if not isinstance(request.allowednumbers, str) or not request.allowednumbers.strip():
        raise MissingField("allowednumbers")

    default_key = normalize_default_key(request.defaultkey, settings.whitelist_default_key)
    if not default_key:
        raise MissingField("defaultkey")

    number = normalize_number(request.input, settings.channel_prefixes)
    if number is None:
        raise InvalidInput()

    allowed = set(parse_numbers(request.allowednumbers, settings.channel_prefixes))
    if not allowed:
        raise NoValidCandidates("allowednumbers")

    if number in allowed:
        logger.info(f"Whitelist hit for {number}")
        return Resolution(message=settings.allowed_marker, outcome=OUTCOME_ALLOWED)

    logger.info(f"Whitelist miss for {number} ({len(allowed)} candidates)")
    return Resolution(message=default_key, outcome=OUTCOME_DEFAULT)
