from __future__ import annotations

from ..core.time import gregorian_to_jdn
from .gregorian import GregorianConverter

# Buddhist Era year = Gregorian year + 543.
BE_OFFSET = 543
THAI_EPOCH = gregorian_to_jdn(1 - BE_OFFSET, 1, 1)


class ThaiBuddhistConverter(GregorianConverter):
    """Thai solar calendar: Gregorian months and days, Buddhist Era years.

    Uses the post-1941 convention (year starts on 1 January) for all dates.
    """

    year_offset = BE_OFFSET
