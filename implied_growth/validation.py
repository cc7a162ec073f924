"""
Form validation for the implied growth calculator.

Kept apart from the model: the page calls ``validate_inputs`` first and only
runs the model when the returned mapping is empty.
"""
import math

# (min, max) bounds for each form field
MARKET_PRICE_RANGE = (1.0, 500.0)
DIVIDEND_RANGE = (0.0, 50.0)
REQUIRED_RETURN_RANGE = (0.0, 25.0)


def _missing(value):
    return value is None or (isinstance(value, float) and math.isnan(value))


def _check_dividend(value, label, errors, field):
    low, high = DIVIDEND_RANGE
    if _missing(value):
        errors[field] = f"{label} is required"
    elif value < low:
        errors[field] = f"{label} cannot be negative"
    elif value > high:
        errors[field] = f"{label} cannot exceed ${high:g}"


def validate_inputs(inputs):
    """Return a mapping of field name to message; empty when the inputs can be used."""
    errors = {}

    price = inputs.market_price
    low, high = MARKET_PRICE_RANGE
    if _missing(price) or not price or price < low:
        errors["market_price"] = f"Market price must be at least ${low:g}"
    elif price > high:
        errors["market_price"] = f"Market price cannot exceed ${high:g}"

    _check_dividend(inputs.dividend_amount, "Current dividend", errors, "dividend_amount")

    required = inputs.required_return
    low, high = REQUIRED_RETURN_RANGE
    if _missing(required) or not required or required <= low:
        errors["required_return"] = "Required return must be positive"
    elif required > high:
        errors["required_return"] = f"Required return cannot exceed {high:g}%"

    _check_dividend(inputs.expected_dividend, "Expected dividend", errors, "expected_dividend")

    # g >= r can only happen when D1/P <= 0
    if not any(_missing(v) for v in (price, required, inputs.expected_dividend)):
        if required > 0 and inputs.expected_dividend > 0 and price > 0:
            implied_growth = required / 100 - inputs.expected_dividend / price
            if implied_growth >= required / 100:
                errors["financial"] = "These inputs would result in invalid growth rate (g ≥ r)"

    return errors


def is_computable(errors):
    return not errors
