from __future__ import annotations

from .base import PayslipCalculator
from ...common.money import Money, round_half_up
from ...core.constants import TAX_ESTIMATE_RATE, UIF_RATE


class StandardPayslipCalculator(PayslipCalculator):
    """Flat-rate estimate: 18% PAYE, 1% UIF, each rounded to whole currency units.

    Illustrative figures only, not tax-table correct.
    """

    def __init__(self, *, tax_rate: float = TAX_ESTIMATE_RATE, uif_rate: float = UIF_RATE):
        self._tax_rate = float(tax_rate)
        self._uif_rate = float(uif_rate)

    def tax_estimate(self, gross: Money) -> int:
        return round_half_up(gross * self._tax_rate)

    def uif_contribution(self, gross: Money) -> int:
        return round_half_up(gross * self._uif_rate)
