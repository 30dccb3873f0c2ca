from hrms.payroll.calculator.standard_calculator import StandardPayslipCalculator


def test_standard_calculator_flat_rates():
    calc = StandardPayslipCalculator()

    assert calc.tax_estimate(10000) == 1800
    assert calc.uif_contribution(10000) == 100


def test_standard_calculator_rounds_halves_up():
    calc = StandardPayslipCalculator()

    # 10050 * 1% = 100.5
    assert calc.uif_contribution(10050) == 101
    # 58250 * 18% = 10485
    assert calc.tax_estimate(58250) == 10485


def test_custom_rates():
    calc = StandardPayslipCalculator(tax_rate=0.1, uif_rate=0)

    assert calc.tax_estimate(1234) == 123
    assert calc.uif_contribution(1234) == 0
