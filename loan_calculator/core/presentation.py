"""Glue between raw form input and the amortization engine.

Parses what the user typed, runs the calculation and shapes the result into
the schedule table and the two chart datasets. Invalid input is reported as a
message, never as a half-built schedule.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from .amortization import AmortizationResult, InvalidInputError, compute_amortization, schedule_frame
from .utils import round_money

logger = logging.getLogger(__name__)


def _parse_float(field_name: str, raw: Any) -> float:
    if raw is None or isinstance(raw, bool):
        raise InvalidInputError(field_name, "a value is required")
    if isinstance(raw, str):
        text = raw.strip().replace(",", "").replace("_", "")
        if not text:
            raise InvalidInputError(field_name, "a value is required")
        raw = text
    try:
        return float(raw)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInputError(field_name, f"{raw!r} is not a number") from None


def parse_principal(raw: Any) -> float:
    return _parse_float("principal", raw)


def parse_rate(raw: Any) -> float:
    """Annual rate as typed in the form, in percent. A trailing '%' is accepted."""
    if isinstance(raw, str):
        raw = raw.strip().rstrip("%")
    return _parse_float("annual_rate_percent", raw)


def parse_term(raw: Any) -> int:
    value = _parse_float("term_periods", raw)
    if not math.isfinite(value) or not value.is_integer():
        raise InvalidInputError("term_periods", f"{raw!r} is not a whole number of months")
    return int(value)


def chart_datasets(result: AmortizationResult) -> Dict[str, Dict[str, List[Any]]]:
    """Series for the per-period payments chart and the loan breakdown chart."""
    labels: List[str] = []
    principal_payments: List[float] = []
    interest_payments: List[float] = []
    for entry in result.schedule:
        labels.append(str(entry.period_number))
        principal_payments.append(round_money(entry.principal_portion))
        interest_payments.append(round_money(entry.interest_portion))

    return {
        "payments": {
            "labels": labels,
            "principal": principal_payments,
            "interest": interest_payments,
        },
        "breakdown": {
            "labels": ["Principal", "Interest"],
            "values": [round_money(result.principal), round_money(result.total_interest)],
        },
    }


@dataclass(frozen=True)
class LoanCalculation:
    result: Optional[AmortizationResult] = None
    table: Optional[pd.DataFrame] = None
    datasets: Dict[str, Dict[str, List[Any]]] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def calculate(raw_principal: Any, raw_rate: Any, raw_term: Any) -> LoanCalculation:
    """Run the calculator on raw form values.

    Invalid input is logged and returned as ``LoanCalculation(error=...)``.
    Any other exception propagates to the caller.
    """
    try:
        principal = parse_principal(raw_principal)
        rate = parse_rate(raw_rate)
        term = parse_term(raw_term)
        result = compute_amortization(principal, rate, term)
    except InvalidInputError as exc:
        logger.warning("Rejected loan input (%s): %s", exc.field_name, exc.message)
        return LoanCalculation(error=str(exc))

    logger.debug(
        "Amortized %.2f at %s%% over %d months: payment %.2f",
        result.principal,
        result.annual_rate_percent,
        result.term_periods,
        result.payment_amount,
    )
    return LoanCalculation(result=result, table=schedule_frame(result), datasets=chart_datasets(result))
