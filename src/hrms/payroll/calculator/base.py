from __future__ import annotations

from abc import ABC, abstractmethod

from ...common.money import Money


class PayslipCalculator(ABC):
    """Calculator interface (Strategy Pattern for payslip deductions)."""

    @abstractmethod
    def tax_estimate(self, gross: Money) -> int:
        raise NotImplementedError

    @abstractmethod
    def uif_contribution(self, gross: Money) -> int:
        raise NotImplementedError
