from __future__ import annotations

import math
from typing import Union

Money = Union[int, float]


def round_half_up(value: Money) -> int:
    """Round to the nearest integer, halves towards +infinity.

    Payslip figures follow the dashboard's rounding, so 100.5 -> 101 (the
    builtin round() would give 100).
    """
    return int(math.floor(value + 0.5))
