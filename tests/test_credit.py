import math

import pytest

from smartcalc.credit import (
    CreditSummary,
    TermUnit,
    annuity,
    annuity_overpayment,
    annuity_payment,
    annuity_total,
    differentiated,
    differentiated_payment,
    to_months,
)


def test_years_and_months_agree():
    assert to_months(3, "years") == to_months(36, TermUnit.MONTHS)


def test_days_convert_to_fraction_of_year():
    assert to_months(360, TermUnit.DAYS) == to_months(1, TermUnit.YEARS)


def test_months_pass_through():
    assert to_months(7, "months") == 7


def test_unknown_unit_rejected():
    with pytest.raises(ValueError):
        to_months(5, "weeks")


def test_annuity_payments_discount_to_principal():
    principal, term, rate = 100000.0, 24, 10.0
    payment = annuity_payment(principal, term, rate)
    monthly = rate / 1200
    present = sum(payment / (1 + monthly) ** k for k in range(1, term + 1))
    assert present == pytest.approx(principal)


def test_annuity_zero_rate_is_nan():
    payment = annuity_payment(1000.0, 12, 0.0)
    assert str(payment) == "nan"
    assert math.isnan(payment) is True


def test_annuity_total_and_overpayment():
    payment = annuity_payment(50000.0, 36, 7.5)
    total = annuity_total(payment, 36)
    assert total == pytest.approx(payment * 36)
    assert annuity_overpayment(total, 50000.0) == pytest.approx(total - 50000.0)
    assert total > 50000.0


def test_annuity_summary_consistent():
    summary = annuity(20000.0, 12, 12.0)
    assert len(summary.payments) == 12
    assert len(set(summary.payments)) == 1
    assert summary.total_payment == pytest.approx(sum(summary.payments))
    assert summary.overpayment == pytest.approx(summary.total_payment - 20000.0)


def test_differentiated_zero_rate_pays_principal_evenly():
    summary = differentiated(1200.0, 12, 0.0)
    assert len(set(summary.payments)) == 1
    assert summary.total_payment == pytest.approx(1200.0)
    assert summary.overpayment == pytest.approx(0.0)


def test_differentiated_payments_decrease():
    summary = differentiated(100000.0, 18, 9.0)
    pairs = zip(summary.payments, summary.payments[1:])
    assert all(earlier > later for earlier, later in pairs)


def test_differentiated_payment_matches_summary():
    summary = differentiated(30000.0, 10, 6.0)
    assert summary.payments[4] == differentiated_payment(30000.0, 10, 6.0, 5)


def test_differentiated_cheaper_than_annuity():
    diff = differentiated(100000.0, 24, 12.0)
    ann = annuity(100000.0, 24, 12.0)
    assert isinstance(diff, CreditSummary)
    assert 0 < diff.overpayment < ann.overpayment


def test_differentiated_interest_parts_sum_to_overpayment():
    principal, term = 60000.0, 12
    summary = differentiated(principal, term, 8.0)
    interest = sum(p - principal / term for p in summary.payments)
    assert interest == pytest.approx(summary.overpayment)