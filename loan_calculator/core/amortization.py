from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Final, Tuple

import pandas as pd

from .utils import round_money


MONTHS_IN_YEAR: Final[int] = 12

SCHEDULE_COLUMNS: Final[Tuple[str, ...]] = ("number", "balance", "payment", "interest", "principal", "remaining")
YEARLY_COLUMNS: Final[Tuple[str, ...]] = ("year", "payment", "interest", "principal", "end_balance")


class InvalidInputError(ValueError):
    """Raised when a loan input is outside the domain of the calculation."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name
        self.message = message


def _finite_number(field_name: str, value: Any) -> float:
    if isinstance(value, (bool, str, bytes)):
        raise InvalidInputError(field_name, f"expected a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInputError(field_name, f"expected a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInputError(field_name, f"must be finite, got {value!r}")
    return number


@dataclass(frozen=True)
class LoanInput:
    """Validated loan terms.

    Parameters
    ----------
    principal : float
        Amount borrowed, strictly positive.
    annual_rate_percent : float
        Nominal annual rate in percent (5.5 means 5.5%), zero allowed.
    term_periods : int
        Number of monthly payments, at least 1.
    """

    principal: float
    annual_rate_percent: float
    term_periods: int

    def __post_init__(self) -> None:
        principal = _finite_number("principal", self.principal)
        if principal <= 0:
            raise InvalidInputError("principal", f"must be greater than 0, got {self.principal!r}")

        rate = _finite_number("annual_rate_percent", self.annual_rate_percent)
        if rate < 0:
            raise InvalidInputError(
                "annual_rate_percent", f"must be 0 or greater, got {self.annual_rate_percent!r}"
            )

        term = self.term_periods
        if isinstance(term, bool) or not isinstance(term, numbers.Integral):
            raise InvalidInputError("term_periods", f"expected a whole number of months, got {term!r}")
        if term < 1:
            raise InvalidInputError("term_periods", f"must be at least 1, got {term!r}")
        try:
            float(term)
        except OverflowError:
            raise InvalidInputError("term_periods", "too large to represent as a number of months") from None

        object.__setattr__(self, "principal", principal)
        object.__setattr__(self, "annual_rate_percent", rate)
        object.__setattr__(self, "term_periods", int(term))

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / MONTHS_IN_YEAR


@dataclass(frozen=True)
class PaymentEntry:
    period_number: int
    payment_amount: float
    balance_before_payment: float
    interest_portion: float
    principal_portion: float

    @property
    def balance_after_payment(self) -> float:
        return self.balance_before_payment - self.principal_portion

    def as_row(self) -> Dict[str, float]:
        """Table row with every amount rounded to cents."""
        return {
            "number": self.period_number,
            "balance": round_money(self.balance_before_payment),
            "payment": round_money(self.payment_amount),
            "interest": round_money(self.interest_portion),
            "principal": round_money(self.principal_portion),
            "remaining": round_money(max(self.balance_after_payment, 0.0)),
        }


@dataclass(frozen=True)
class AmortizationResult:
    principal: float
    annual_rate_percent: float
    term_periods: int
    monthly_rate: float
    payment_amount: float
    total_payment: float
    total_interest: float
    schedule: Tuple[PaymentEntry, ...] = field(default_factory=tuple)

    def summary(self) -> Dict[str, float]:
        """Headline figures rounded for display; ``monthly_rate`` is left as computed."""
        return {
            "principal": round_money(self.principal),
            "annual_rate_percent": self.annual_rate_percent,
            "monthly_rate": self.monthly_rate,
            "term_periods": self.term_periods,
            "payment": round_money(self.payment_amount),
            "total_payment": round_money(self.total_payment),
            "total_interest": round_money(self.total_interest),
        }


def _level_payment(loan: LoanInput) -> float:
    principal, n_months, monthly_rate = loan.principal, loan.term_periods, loan.monthly_rate
    if monthly_rate == 0:
        return principal / n_months
    try:
        # (1 + r)^n - 1 without cancellation for tiny rates
        growth = math.expm1(n_months * math.log1p(monthly_rate))
    except OverflowError:
        # Interest-only limit of the annuity formula
        return principal * monthly_rate
    factor = growth + 1
    return principal * (monthly_rate * factor) / growth


def fixed_payment(principal: float, annual_rate_percent: float, term_periods: int) -> float:
    """Compute the level monthly payment of a fully amortizing loan.

    Raises
    ------
    InvalidInputError
        If any of the loan terms is outside its domain.
    """
    return _level_payment(LoanInput(principal, annual_rate_percent, term_periods))


def amortize(loan: LoanInput) -> AmortizationResult:
    """Build the monthly schedule for already validated loan terms.

    Notes
    -----
    - The running balance is never rounded; rounding happens in ``as_row``
      and ``summary`` only.
    - The last period repays whatever balance is left, so the loan closes at
      exactly zero even when the level payment collapses to interest only.
    """
    n_months = loan.term_periods
    monthly_rate = loan.monthly_rate
    payment = _level_payment(loan)

    entries = []
    balance = loan.principal
    for m in range(1, n_months + 1):
        interest = balance * monthly_rate
        principal_component = payment - interest
        period_payment = payment

        if m == n_months:
            principal_component = balance
            period_payment = interest + principal_component

        entries.append(
            PaymentEntry(
                period_number=m,
                payment_amount=period_payment,
                balance_before_payment=balance,
                interest_portion=interest,
                principal_portion=principal_component,
            )
        )
        balance -= principal_component

    total_payment = payment * n_months
    return AmortizationResult(
        principal=loan.principal,
        annual_rate_percent=loan.annual_rate_percent,
        term_periods=n_months,
        monthly_rate=monthly_rate,
        payment_amount=payment,
        total_payment=total_payment,
        total_interest=total_payment - loan.principal,
        schedule=tuple(entries),
    )


def compute_amortization(principal: float, annual_rate_percent: float, term_periods: int) -> AmortizationResult:
    """Validate the loan terms and compute the full amortization schedule.

    Parameters
    ----------
    principal : float
        Initial loan amount.
    annual_rate_percent : float
        Nominal annual interest rate in percent (e.g., 6 for 6%).
    term_periods : int
        Number of monthly payments.

    Returns
    -------
    AmortizationResult
        Level payment, totals and one ``PaymentEntry`` per month.

    Raises
    ------
    InvalidInputError
        Before any computation, if an input is outside its domain.
    """
    return amortize(LoanInput(principal, annual_rate_percent, term_periods))


def schedule_frame(result: AmortizationResult) -> pd.DataFrame:
    """Tabulate a schedule, one row per month, amounts rounded to cents.

    Columns: number, balance, payment, interest, principal, remaining
    """
    return pd.DataFrame([entry.as_row() for entry in result.schedule], columns=list(SCHEDULE_COLUMNS))


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a monthly schedule frame by year.

    Returns a DataFrame with columns: year, payment, interest, principal, end_balance
    """
    if schedule.empty:
        return pd.DataFrame(columns=list(YEARLY_COLUMNS), data=[])

    schedule = schedule.copy()
    schedule["year"] = (schedule["number"] - 1) // MONTHS_IN_YEAR + 1
    agg = (
        schedule.groupby("year", as_index=False)[["payment", "interest", "principal"]]
        .sum()
        .sort_values("year")
    )
    # Sums of cent values pick up float noise
    agg[["payment", "interest", "principal"]] = agg[["payment", "interest", "principal"]].round(2)
    # Balance left after the last payment of each year
    end_balances = (
        schedule.groupby("year", as_index=False)["remaining"].last().rename(columns={"remaining": "end_balance"})
    )
    return agg.merge(end_balances, on="year", how="left")[list(YEARLY_COLUMNS)]
