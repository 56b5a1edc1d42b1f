from __future__ import annotations

import math

from ..attendance.model import Number


def parse_prelek_amount(text: object) -> Number:
    """Parse the free-text prelek amount.

    Empty, non-numeric, NaN, infinite and negative inputs all become 0.
    Integral amounts come back as ``int``.
    """
    if text is None or isinstance(text, bool):
        return 0
    if isinstance(text, (int, float)):
        amount = float(text)
    else:
        raw = str(text).strip()
        if not raw or "_" in raw:
            return 0
        try:
            amount = float(raw)
        except ValueError:
            return 0

    if math.isnan(amount) or math.isinf(amount) or amount < 0:
        return 0
    if amount.is_integer():
        return int(amount)
    return amount
