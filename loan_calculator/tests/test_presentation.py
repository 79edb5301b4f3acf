import logging

import pytest

from loan_calculator.core.amortization import InvalidInputError, compute_amortization
from loan_calculator.core.presentation import (
    calculate,
    chart_datasets,
    parse_principal,
    parse_rate,
    parse_term,
)


def test_parse_accepts_form_text():
    assert parse_principal(" 10,000.50 ") == 10_000.5
    assert parse_rate("5.5%") == 5.5
    assert parse_rate(6) == 6.0
    assert parse_term("360") == 360
    assert parse_term("12.0") == 12
    assert parse_term(24) == 24


@pytest.mark.parametrize("raw", ["", "   ", None, "abc", True])
def test_parse_rejects_missing_or_non_numeric(raw):
    with pytest.raises(InvalidInputError):
        parse_principal(raw)


@pytest.mark.parametrize("raw", ["12.5", "nan", "inf", "twelve"])
def test_parse_term_requires_whole_months(raw):
    with pytest.raises(InvalidInputError) as excinfo:
        parse_term(raw)
    assert excinfo.value.field_name == "term_periods"


def test_chart_datasets_shape():
    res = compute_amortization(10_000, 6, 12)
    data = chart_datasets(res)
    payments = data["payments"]
    assert payments["labels"] == [str(i) for i in range(1, 13)]
    assert payments["principal"][0] == 810.66
    assert payments["interest"][0] == 50.0
    assert len(payments["principal"]) == len(payments["interest"]) == 12

    breakdown = data["breakdown"]
    assert breakdown["labels"] == ["Principal", "Interest"]
    assert breakdown["values"] == [10_000.0, 327.97]


def test_calculate_success():
    calc = calculate("10000", "6", "12")
    assert calc.ok
    assert calc.error is None
    assert calc.result == compute_amortization(10_000, 6, 12)
    assert len(calc.table) == 12
    assert calc.datasets["breakdown"]["values"][0] == 10_000.0


@pytest.mark.parametrize(
    "raw",
    [("0", "6", "12"), ("10000", "-1", "12"), ("10000", "6", "0"), ("", "6", "12"), ("10000", "6", "x"),
     (10**400, "6", "12"), (1000, 5, 10**400)],
)
def test_calculate_invalid_input_yields_no_schedule(raw, caplog):
    with caplog.at_level(logging.WARNING, logger="loan_calculator.core.presentation"):
        calc = calculate(*raw)
    assert not calc.ok
    assert calc.result is None
    assert calc.table is None
    assert calc.datasets == {}
    assert calc.error
    assert "Rejected loan input" in caplog.text
