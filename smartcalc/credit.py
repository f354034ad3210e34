"""Loan repayment schedules: annuity and differentiated payments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class TermUnit(str, Enum):
    """Unit in which a loan term is given."""

    MONTHS = "months"
    YEARS = "years"
    DAYS = "days"


@dataclass(frozen=True)
class CreditSummary:
    """Monthly payments of a loan with its total cost and overpayment."""

    payments: tuple[float, ...]
    total_payment: float
    overpayment: float


def to_months(term: float, unit: TermUnit | str = TermUnit.MONTHS) -> float:
    """Convert a term to months; a month is counted as 30 days."""
    unit = TermUnit(unit)
    if unit is TermUnit.YEARS:
        return term * 12
    if unit is TermUnit.DAYS:
        return term / 30
    return float(term)


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _growth(rate: float, term: float) -> float:
    try:
        return math.pow(1 + rate, term)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _monthly_rate(interest_rate: float) -> float:
    return interest_rate / 12 / 100


def annuity_payment(principal: float, term: float, interest_rate: float) -> float:
    """Fixed monthly payment for ``term`` months at an annual rate in percent."""
    rate = _monthly_rate(interest_rate)
    growth = _growth(rate, term)
    return principal * _divide(rate * growth, growth - 1)


def annuity_total(monthly_payment: float, term: float) -> float:
    """Total paid over the whole term."""
    return monthly_payment * term


def annuity_overpayment(total: float, principal: float) -> float:
    """Amount paid on top of the principal."""
    return total - principal


def differentiated_payment(
    principal: float, term: float, interest_rate: float, month: int
) -> float:
    """Payment due in ``month`` (counted from 1) of a differentiated schedule."""
    rate = _monthly_rate(interest_rate)
    principal_part = principal / term
    remaining = principal - principal_part * (month - 1)
    return principal_part + remaining * rate


def annuity(principal: float, term: float, interest_rate: float) -> CreditSummary:
    """Summarise an annuity loan; ``term`` is in months."""
    payment = annuity_payment(principal, term, interest_rate)
    total = annuity_total(payment, term)
    months = max(int(term), 0)
    return CreditSummary(
        payments=(payment,) * months,
        total_payment=total,
        overpayment=annuity_overpayment(total, principal),
    )


def differentiated(
    principal: float, term: float, interest_rate: float
) -> CreditSummary:
    """Summarise a differentiated loan; ``term`` is in months."""
    payments = tuple(
        differentiated_payment(principal, term, interest_rate, month)
        for month in range(1, int(term) + 1)
    )
    total = sum(payments)
    return CreditSummary(
        payments=payments,
        total_payment=total,
        overpayment=total - principal,
    )