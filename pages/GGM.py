import logging

import streamlit as st

from implied_growth.charts import CHART_TITLE, build_chart, cashflow_table
from implied_growth.config import settings
from implied_growth.formatting import (
    EDUCATIONAL_CONTEXT,
    MODEL_EXPLANATION,
    chart_description,
    consistency_note,
    format_percent,
    result_description,
    validity_warning,
)
from implied_growth.logs import configure_logging
from implied_growth.model import GrowthInputs
from implied_growth.validation import is_computable, validate_inputs

configure_logging()
logger = logging.getLogger("implied_growth.page")

st.title("Implied Growth Rate Calculator (Gordon Growth Model)")

defaults = settings.default_inputs()

# Stock parameters
st.subheader("Stock Parameters")
col1, col2, col3, col4 = st.columns(4)
with col1:
    market_price = st.number_input("Market Price per Share ($)", value=defaults.market_price,
                                   step=0.01, format="%.2f", key="market_price",
                                   help="$1 - $500. The current market price per share")
with col2:
    dividend_amount = st.number_input("Current Annual Dividend ($)", value=defaults.dividend_amount,
                                      step=0.01, format="%.2f", key="dividend_amount",
                                      help="$0 - $50. The current annual dividend per share")
with col3:
    required_return = st.number_input("Required Return (%)", value=defaults.required_return,
                                      step=0.01, format="%.2f", key="required_return",
                                      help="0% - 25%. The required return for this investment")
with col4:
    expected_dividend = st.number_input("Expected Next Dividend ($)", value=defaults.expected_dividend,
                                        step=0.01, format="%.2f", key="expected_dividend",
                                        help="$0 - $50. The expected dividend for the next year")

inputs = GrowthInputs(market_price, dividend_amount, required_return, expected_dividend)
errors = validate_inputs(inputs)

model = None
if not is_computable(errors):
    logger.info("Rejected inputs: %s", ", ".join(sorted(errors)))
    st.error("**Please correct the following:**\n" + "\n".join(f"- {msg}" for msg in errors.values()))
else:
    model = inputs.compute()

if model is not None and not model.is_valid:
    logger.warning("Degenerate implied growth %.4f%% for %s", model.implied_growth_percent, inputs)
    st.warning(f"**Warning:** {validity_warning(model, inputs)}")

if model is not None and not model.d1_consistent:
    st.info(f"**Note:** {consistency_note(model, inputs)}")

if model is not None and model.is_valid:
    # Results
    st.subheader("Calculation Results")
    st.metric("Implied Growth Rate", format_percent(model.implied_growth_percent),
              help="The growth rate implied by current market price")
    st.caption(result_description(inputs))

    # Chart
    st.subheader(CHART_TITLE)
    st.caption("(Only first 10 years are shown)")
    st.plotly_chart(build_chart(model))
    st.caption(chart_description(model, inputs))

    with st.expander("Cash Flow Projections Data Table"):
        st.dataframe(cashflow_table(model), hide_index=True)

    st.markdown(MODEL_EXPLANATION)

# Educational context
st.subheader("Educational Context")
st.markdown("\n\n".join(f"**{title}:** {text}" for title, text in EDUCATIONAL_CONTEXT))
