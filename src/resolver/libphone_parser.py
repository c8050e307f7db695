from __future__ import annotations

from typing import Optional

import phonenumbers
from phonenumbers import region_code_for_number
from phonenumbers.phonenumberutil import REGION_CODE_FOR_NON_GEO_ENTITY, UNKNOWN_REGION

from .base import CountryLookup, PhoneParser


# Region codes that do not name a country
NON_COUNTRY_REGIONS = {REGION_CODE_FOR_NON_GEO_ENTITY, UNKNOWN_REGION}


class LibPhoneParser(PhoneParser):
    """Phone parser based on Google's libphonenumber.

    Numbers are parsed without a default region, so only inputs carrying an
    international prefix resolve. This only checks format and metadata, not
    real-time line activity.
    """

    source_name = "libphonenumber"

    def lookup(self, number: str) -> Optional[CountryLookup]:
        try:
            parsed = phonenumbers.parse(number, None)
        except phonenumbers.NumberParseException:
            return None

        valid = phonenumbers.is_valid_number(parsed)
        region = region_code_for_number(parsed)
        if region in NON_COUNTRY_REGIONS:
            region = None

        return CountryLookup(country=region, valid=valid)
