from __future__ import annotations

import io
import logging
import os
import sys

import pandas as pd
import streamlit as st
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table

# Ensure package import works on Streamlit Cloud when CWD != repo root
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, "..", ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from loan_calculator.core import plots
from loan_calculator.core.amortization import AmortizationResult, aggregate_yearly
from loan_calculator.core.presentation import LoanCalculation, calculate
from loan_calculator.core.utils import money, percent
from config import (
    PRINCIPAL,
    ANNUAL_RATE_PERCENT,
    TERM_MONTHS,
    CURRENCY_SYMBOL,
    PRINCIPAL_COLOR,
    INTEREST_COLOR,
    LOG_LEVEL,
)

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Loan Calculator", layout="wide")

TABLE_LABELS = {
    "number": "Payment#",
    "balance": "Balance",
    "payment": "Payment Amount",
    "interest": "Interest",
    "principal": "Principal",
    "remaining": "Remaining",
}


def sidebar_inputs():
    st.sidebar.header("Loan")
    principal = st.sidebar.number_input("Principal", min_value=0.0, value=PRINCIPAL, step=1_000.0, format="%0.2f")
    rate = st.sidebar.number_input("Interest rate (% annual)", min_value=0.0, max_value=100.0, value=ANNUAL_RATE_PERCENT, step=0.1, format="%0.2f")
    months = st.sidebar.number_input("Term (months)", min_value=0, value=TERM_MONTHS, step=1)
    return principal, rate, months


def style_money(df: pd.DataFrame):
    money_cols = [c for c in df.select_dtypes(include=["number"]).columns if c not in ("number", "year")]
    return df.style.format({col: "{:,.2f}" for col in money_cols})


def render_summary(result: AmortizationResult):
    st.subheader("Summary")
    summary = result.summary()
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Monthly payment", money(summary["payment"], CURRENCY_SYMBOL))
    with c2:
        st.metric("Total payment", money(summary["total_payment"], CURRENCY_SYMBOL))
    with c3:
        st.metric("Total interest", money(summary["total_interest"], CURRENCY_SYMBOL))
    with c4:
        st.metric("Monthly rate", percent(result.monthly_rate * 100, digits=4))


def render_graphs(calc: LoanCalculation):
    st.subheader("Charts")
    as_lines = st.toggle("Show payments as lines", value=False)
    colors = dict(principal_color=PRINCIPAL_COLOR, interest_color=INTEREST_COLOR)

    c1, c2 = st.columns(2)
    with c1:
        if as_lines:
            fig1 = plots.payments_line(calc.datasets, **colors)
        else:
            fig1 = plots.payments_bar(calc.datasets, **colors)
        st.plotly_chart(fig1, use_container_width=True)
        st.download_button("Export PNG (Payments)", data=fig1.to_image(format="png"), file_name="payments.png", mime="image/png")
    with c2:
        fig2 = plots.loan_breakdown_pie(calc.datasets, **colors)
        st.plotly_chart(fig2, use_container_width=True)
        st.download_button("Export PNG (Breakdown)", data=fig2.to_image(format="png"), file_name="loan_breakdown.png", mime="image/png")


def render_tables(calc: LoanCalculation):
    st.subheader("Schedule")
    view_yearly = st.toggle("Yearly view", value=False)

    if view_yearly:
        table = aggregate_yearly(calc.table)
        file_name = "schedule_yearly.csv"
    else:
        table = calc.table
        file_name = "schedule_monthly.csv"

    st.dataframe(style_money(table.rename(columns=TABLE_LABELS)), use_container_width=True, hide_index=True)
    st.download_button(
        "Export CSV",
        data=table.to_csv(index=False).encode("utf-8"),
        file_name=file_name,
        mime="text/csv",
    )


def render_report(result: AmortizationResult):
    st.subheader("Report")
    if st.button("Generate PDF"):
        summary = result.summary()
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4)
        styles = getSampleStyleSheet()
        story = []
        story.append(Paragraph("Loan amortization report", styles["Title"]))
        story.append(Spacer(1, 12))
        story.append(Paragraph(f"Principal: {money(summary['principal'], CURRENCY_SYMBOL)}", styles["Normal"]))
        story.append(Paragraph(f"Interest rate: {percent(result.annual_rate_percent)}", styles["Normal"]))
        story.append(Paragraph(f"Term: {result.term_periods} months", styles["Normal"]))
        story.append(Paragraph(f"Monthly payment: {money(summary['payment'], CURRENCY_SYMBOL)}", styles["Normal"]))
        story.append(Paragraph(f"Total payment: {money(summary['total_payment'], CURRENCY_SYMBOL)}", styles["Normal"]))
        story.append(Paragraph(f"Total interest: {money(summary['total_interest'], CURRENCY_SYMBOL)}", styles["Normal"]))
        story.append(Spacer(1, 12))
        rows = [["Payment#", "Balance", "Payment", "Interest", "Principal"]]
        for entry in result.schedule:
            row = entry.as_row()
            rows.append([str(row["number"])] + [f"{row[k]:,.2f}" for k in ("balance", "payment", "interest", "principal")])
        story.append(Table(rows, repeatRows=1))
        doc.build(story)
        buffer.seek(0)
        st.download_button("Download PDF", data=buffer, file_name="loan_report.pdf", mime="application/pdf")


def main():
    st.title("Loan Calculator")
    principal, rate, months = sidebar_inputs()

    calc = calculate(principal, rate, months)
    if not calc.ok:
        st.error(f"Invalid input: {calc.error}")
        return

    logger.info("Rendering schedule of %d payments", calc.result.term_periods)
    render_summary(calc.result)

    tabs = st.tabs(["Charts", "Schedule"])
    with tabs[0]:
        render_graphs(calc)
    with tabs[1]:
        render_tables(calc)

    st.divider()
    render_report(calc.result)


if __name__ == "__main__":
    main()
