import numpy as np
import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from .formatting import bar_label, format_flow

DIVIDEND_COLOR = "#10b981"
INVESTMENT_COLOR = "#f87171"
GROWTH_COLOR = "#7c3aed"

CHART_TITLE = "Equity Cash Flows (in US$) and Resulting Implied Growth Rate"


def chart_rows(result):
    """One chart-ready row per cash-flow point, carrying the constant growth line."""
    return pd.DataFrame({
        "year_label": [str(cf.year) for cf in result.cashflows],
        "year": [cf.year for cf in result.cashflows],
        "dividend_flow": [cf.dividend for cf in result.cashflows],
        "investment_flow": [cf.investment for cf in result.cashflows],
        "growth_line": [result.implied_growth_percent] * len(result.cashflows),
    })


def cashflow_table(result):
    rows = chart_rows(result)
    return pd.DataFrame({
        "Year": rows["year_label"],
        "Investment ($)": rows["investment_flow"].map(format_flow),
        "Dividend ($)": rows["dividend_flow"].map(format_flow),
        "Growth Rate (%)": rows["growth_line"].map(lambda v: f"{v:.2f}"),
    })


def growth_axis_range(result):
    return [0, float(np.maximum(5, result.implied_growth_percent * 1.5))]


def build_chart(result):
    rows = chart_rows(result)
    fig = make_subplots(specs=[[{"secondary_y": True}]])

    fig.add_trace(go.Bar(
        x=rows["year_label"],
        y=rows["dividend_flow"],
        name="Dividend Cash Flow",
        marker_color=DIVIDEND_COLOR,
        text=[bar_label(v) for v in rows["dividend_flow"]],
        textposition="outside",
        hovertemplate="Year: %{x}<br>Dividend Cash Flow: $%{y:.2f}<extra></extra>",
    ), secondary_y=False)

    fig.add_trace(go.Bar(
        x=rows["year_label"],
        y=rows["investment_flow"],
        name="Initial Investment",
        marker_color=INVESTMENT_COLOR,
        text=[bar_label(v) for v in rows["investment_flow"]],
        textposition="outside",
        hovertemplate="Year: %{x}<br>Initial Investment: $%{y:.2f}<extra></extra>",
    ), secondary_y=False)

    fig.add_trace(go.Scatter(
        x=rows["year_label"],
        y=rows["growth_line"],
        mode="lines",
        name=f"Growth Rate: {result.implied_growth_percent:.2f}%",
        line=dict(color=GROWTH_COLOR, width=3),
        hovertemplate="Year: %{x}<br>Growth Rate: %{y:.2f}%<extra></extra>",
    ), secondary_y=True)

    fig.update_layout(
        barmode="relative",
        height=450,
        margin=dict(t=60, r=100, l=20, b=20),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
    )
    fig.update_xaxes(title_text="Years")
    fig.update_yaxes(title_text="Cash Flows ($)", tickprefix="$", secondary_y=False)
    fig.update_yaxes(
        title_text="Growth Rate (%)",
        ticksuffix="%",
        tickformat=".1f",
        range=growth_axis_range(result),
        showgrid=False,
        secondary_y=True,
    )
    return fig
