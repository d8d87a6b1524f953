"""
Fraction parsing and the epsilon used to clean up ledger drift.
"""

import re
from typing import Any, Optional

EPSILON = 1e-9

_FRACTION_RE = re.compile(r'^(\d+)/(\d+)$', re.ASCII)


def parse_fraction(text: Any) -> Optional[float]:
    """
    Parse an ownership fraction such as "1/4".

    Only the exact "<integer>/<integer>" shape is accepted, with optional
    surrounding whitespace. Decimals, mixed numbers and anything else are
    not fractions here.

    Args:
        text: Fraction string (or None)

    Returns:
        numerator / denominator, or None if missing, malformed or the
        denominator is zero
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None

    match = _FRACTION_RE.match(text)
    if not match:
        return None

    try:
        numerator = int(match.group(1))
        denominator = int(match.group(2))
        if denominator == 0:
            return None
        return numerator / denominator
    except (OverflowError, ValueError):
        # Digit strings past int() limits or quotients past float range
        return None


def is_negligible(value: float) -> bool:
    """True when a ledger balance is indistinguishable from zero"""
    return abs(value) < EPSILON
