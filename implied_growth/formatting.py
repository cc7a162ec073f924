"""Text shown around the model output: money and percent strings, warnings and notes."""

EDUCATIONAL_CONTEXT = [
    ("Implied Growth Rate",
     "The dividend growth rate that investors are implicitly expecting based on current market pricing."),
    ("Calculation Formula",
     "g = r - (D₁ ÷ P₀), where g is growth rate, r is required return, "
     "D₁ is next year's dividend, and P₀ is current price."),
    ("Market Expectations",
     "This model reveals what the market believes about future growth prospects "
     "by analyzing current stock prices."),
    ("Consistency Check",
     "The calculator compares your expected dividend (D₁) with what the current dividend "
     "would grow to at the implied rate."),
    ("Applications",
     "Useful for valuation analysis, identifying overvalued/undervalued stocks, "
     "and understanding market sentiment about growth prospects."),
]

MODEL_EXPLANATION = (
    "**Implied Growth Rate Model:** Given the market price and required return, this calculates "
    "what growth rate investors are implicitly expecting. The model shows how current market pricing "
    "reflects growth expectations for dividend payments."
)


def format_currency(value):
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def format_percent(value):
    """`value` is already expressed in percent."""
    return f"{value:.2f}%"


def format_flow(value):
    """Accounting style for the cash-flow table: outflows in parentheses, zero as '--'."""
    if not value:
        return "--"
    if value < 0:
        return f"({abs(value):.2f})"
    return f"{value:.2f}"


def bar_label(value):
    # Bars below one cent are left unlabeled
    if not value or abs(value) < 0.01:
        return ""
    if value < 0:
        return f"(${abs(value):.2f})"
    return f"${value:.2f}"


def validity_warning(result, inputs):
    return (
        "Implied growth rate should be positive and less than required return for a valid model. "
        f"Current: g = {format_percent(result.implied_growth_percent)}, "
        f"r = {format_percent(inputs.required_return)}"
    )


def consistency_note(result, inputs):
    return (
        f"Expected Dividend ({format_currency(inputs.expected_dividend)}) differs from calculated D₁ "
        f"({format_currency(result.calculated_d1)}) based on current dividend and implied growth rate."
    )


def result_description(inputs):
    return (
        "Using Gordon Growth Model: g = r - (D₁ ÷ P) | "
        f"Given required return: {format_percent(inputs.required_return)}"
    )


def chart_description(result, inputs):
    return (
        f"Bar chart showing initial stock purchase of {format_currency(inputs.market_price)} "
        f"and projected dividend growth starting at {format_currency(inputs.dividend_amount)} "
        f"over {len(result.cashflows) - 1} years, with implied growth rate of "
        f"{format_percent(result.implied_growth_percent)} based on required return of "
        f"{format_percent(inputs.required_return)} and expected next dividend of "
        f"{format_currency(inputs.expected_dividend)}"
    )
