from __future__ import annotations

from ..core.time import julian_to_jdn
from .coptic import CopticConverter

# Amete Mihret: 1 Meskerem 1 = 29 August 8 (Julian).
ETHIOPIAN_EPOCH = julian_to_jdn(8, 8, 29)


class EthiopianConverter(CopticConverter):
    """Ethiopian calendar: the Coptic structure with an epoch 276 years earlier."""

    epoch = ETHIOPIAN_EPOCH
