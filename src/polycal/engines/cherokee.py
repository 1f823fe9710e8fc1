from __future__ import annotations

from .gregorian import GregorianConverter


class CherokeeConverter(GregorianConverter):
    """Cherokee moon names laid over the Gregorian months.

    The traditional thirteen-moon count is not reconstructed; each Gregorian
    month carries the name of the moon that usually falls in it.
    """
