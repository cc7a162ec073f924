from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

PAGE = Path(__file__).resolve().parents[1] / "pages" / "GGM.py"


@pytest.fixture
def app():
    return AppTest.from_file(str(PAGE), default_timeout=30).run()


def test_default_inputs_render_results(app):
    assert not app.exception
    assert app.metric[0].value == "0.99%"
    # D1 of 3.50 does not match 3.60 grown at the implied rate
    assert len(app.info) == 1
    assert len(app.warning) == 0
    assert len(app.error) == 0


def test_invalid_input_blocks_computation(app):
    app.number_input(key="market_price").set_value(0.5).run()

    assert not app.exception
    assert "Market price must be at least $1" in app.error[0].value
    assert len(app.metric) == 0


def test_negative_growth_shows_warning(app):
    app.number_input(key="expected_dividend").set_value(5.0).run()

    assert not app.exception
    assert "Implied growth rate should be positive" in app.warning[0].value
    assert len(app.metric) == 0
