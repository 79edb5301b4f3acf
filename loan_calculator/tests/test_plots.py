from loan_calculator.core import plots
from loan_calculator.core.amortization import compute_amortization
from loan_calculator.core.presentation import chart_datasets


def _datasets():
    return chart_datasets(compute_amortization(10_000, 6, 12))


def test_payments_bar_is_stacked():
    fig = plots.payments_bar(_datasets())
    assert fig.layout.barmode == "stack"
    assert [t.name for t in fig.data] == ["Principal", "Interest"]
    assert list(fig.data[0].x) == [str(i) for i in range(1, 13)]
    assert fig.data[0].marker.color == plots.DEFAULT_PRINCIPAL_COLOR


def test_payments_line_has_both_series():
    fig = plots.payments_line(_datasets(), principal_color="blue", interest_color="red")
    assert [t.type for t in fig.data] == ["scatter", "scatter"]
    assert fig.data[1].line.color == "red"


def test_loan_breakdown_pie():
    fig = plots.loan_breakdown_pie(_datasets())
    pie = fig.data[0]
    assert list(pie.labels) == ["Principal", "Interest"]
    assert list(pie.values) == [10_000.0, 327.97]
    assert fig.layout.title.text == "Loan Breakdown"
