"""
Date Parser - Strict DD/MM/YYYY Parsing.

Converts travel dates supplied as text into comparable date values.

Design Notes:
    - Exact layout: zero-padded day and month, four-digit year, "/" separators
    - Strict calendar resolution: 29/02 only exists in leap years, no clamping
    - Never raises; invalid input yields None
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Optional

from flight_search.domain.entities import DATE_FORMAT

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")


def parse_travel_date(text: Optional[str]) -> Optional[date]:
    """
    Parse a DD/MM/YYYY date.

    Args:
        text: Date text, may be None or empty

    Returns:
        The calendar date, or None if the text is absent, does not match
        the layout, or does not denote a real date
    """
    if not text:
        return None

    if _DATE_PATTERN.fullmatch(text) is None:
        logger.debug(f"Date {text!r} does not match DD/MM/YYYY")
        return None

    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        logger.debug(f"Date {text!r} is not a valid calendar date")
        return None
