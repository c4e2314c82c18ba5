"""ISO 4217 currency code lookup.

The code table comes from ``pycountry``; this module only adds the
descriptor's shape rule (three uppercase letters) on top of it.
"""

import re

import pycountry

_ALPHA_CODE = re.compile(r"[A-Z]{3}")


def is_currency_code(code: str) -> bool:
    """Return True if ``code`` is an active ISO 4217 alphabetic code.

    Lookups in ``pycountry`` are case-insensitive, so lowercase input
    is rejected before the table is consulted.
    """
    if not _ALPHA_CODE.fullmatch(code):
        return False
    return pycountry.currencies.get(alpha_3=code) is not None
