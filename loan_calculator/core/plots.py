from __future__ import annotations

from typing import Any, Dict, List

import plotly.graph_objects as go

DEFAULT_PRINCIPAL_COLOR = "#5c9efa"
DEFAULT_INTEREST_COLOR = "#fa5c6a"


def payments_bar(
    datasets: Dict[str, Dict[str, List[Any]]],
    title: str = "Payments",
    principal_color: str = DEFAULT_PRINCIPAL_COLOR,
    interest_color: str = DEFAULT_INTEREST_COLOR,
) -> go.Figure:
    """Stacked bars of principal vs interest for each payment."""
    payments = datasets["payments"]
    fig = go.Figure()
    fig.add_bar(x=payments["labels"], y=payments["principal"], name="Principal", marker_color=principal_color)
    fig.add_bar(x=payments["labels"], y=payments["interest"], name="Interest", marker_color=interest_color)
    fig.update_layout(
        title=title,
        barmode="stack",
        xaxis_title="Payment #",
        yaxis_title="Amount",
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
    )
    return fig


def payments_line(
    datasets: Dict[str, Dict[str, List[Any]]],
    title: str = "Payments",
    principal_color: str = DEFAULT_PRINCIPAL_COLOR,
    interest_color: str = DEFAULT_INTEREST_COLOR,
) -> go.Figure:
    payments = datasets["payments"]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(x=payments["labels"], y=payments["principal"], mode="lines", name="Principal", line=dict(color=principal_color))
    )
    fig.add_trace(
        go.Scatter(x=payments["labels"], y=payments["interest"], mode="lines", name="Interest", line=dict(color=interest_color))
    )
    fig.update_layout(title=title, xaxis_title="Payment #", yaxis_title="Amount")
    return fig


def loan_breakdown_pie(
    datasets: Dict[str, Dict[str, List[Any]]],
    title: str = "Loan Breakdown",
    principal_color: str = DEFAULT_PRINCIPAL_COLOR,
    interest_color: str = DEFAULT_INTEREST_COLOR,
) -> go.Figure:
    breakdown = datasets["breakdown"]
    fig = go.Figure(
        go.Pie(
            labels=breakdown["labels"],
            values=breakdown["values"],
            marker=dict(colors=[principal_color, interest_color]),
            sort=False,
        )
    )
    fig.update_layout(title=title)
    return fig
