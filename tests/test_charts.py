import pytest

from implied_growth.charts import (
    DIVIDEND_COLOR,
    GROWTH_COLOR,
    INVESTMENT_COLOR,
    build_chart,
    cashflow_table,
    chart_rows,
    growth_axis_range,
)
from implied_growth.model import compute


@pytest.fixture
def result():
    return compute(54.56, 3.60, 7.40, 3.50)


def test_chart_rows_follow_cashflows(result):
    rows = chart_rows(result)

    assert list(rows.columns) == ["year_label", "year", "dividend_flow", "investment_flow", "growth_line"]
    assert len(rows) == 11
    assert rows["year_label"].tolist() == [str(y) for y in range(11)]
    assert rows["investment_flow"].iloc[0] == -54.56
    assert rows["dividend_flow"].iloc[0] == 0
    assert rows["dividend_flow"].iloc[1:].tolist() == [cf.dividend for cf in result.cashflows[1:]]
    assert (rows["growth_line"] == result.implied_growth_percent).all()


def test_cashflow_table_formatting(result):
    table = cashflow_table(result)

    assert list(table.columns) == ["Year", "Investment ($)", "Dividend ($)", "Growth Rate (%)"]
    assert table.iloc[0].tolist() == ["0", "(54.56)", "--", "0.99"]
    assert table["Investment ($)"].iloc[1:].eq("--").all()
    assert table["Dividend ($)"].iloc[1] == "3.64"


def test_growth_axis_range():
    assert growth_axis_range(compute(54.56, 3.60, 7.40, 3.50)) == [0, 5]
    # g = 20% - 1/100 = 19%
    assert growth_axis_range(compute(100.0, 1.0, 20.0, 1.0)) == [0, pytest.approx(28.5)]


def test_build_chart_traces(result):
    fig = build_chart(result)

    dividend, investment, growth = fig.data
    assert dividend.type == "bar" and dividend.marker.color == DIVIDEND_COLOR
    assert investment.type == "bar" and investment.marker.color == INVESTMENT_COLOR
    assert growth.type == "scatter" and growth.line.color == GROWTH_COLOR
    assert growth.yaxis == "y2"
    assert fig.layout.barmode == "relative"
    assert investment.text[0] == "($54.56)"
    assert dividend.text[0] == ""
    assert list(fig.layout.yaxis2.range) == [0, 5]
