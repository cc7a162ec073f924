import json
import logging

from implied_growth.config import Settings, settings
from implied_growth.logs import JsonFormatter, configure_logging
from implied_growth.model import GrowthInputs


def test_default_inputs_come_from_settings():
    custom = Settings(DEFAULT_MARKET_PRICE=100.0, DEFAULT_DIVIDEND=2.0,
                      DEFAULT_REQUIRED_RETURN=9.0, DEFAULT_EXPECTED_DIVIDEND=2.1)
    assert custom.default_inputs() == GrowthInputs(100.0, 2.0, 9.0, 2.1)


def test_shipped_defaults_are_usable():
    inputs = settings.default_inputs()
    assert inputs.market_price > 0
    assert inputs.required_return > 0


def test_configure_logging_is_idempotent():
    configure_logging(level="debug")
    logger = configure_logging(level="info")

    assert logger.name == "implied_growth"
    assert logger.level == logging.INFO
    assert sum(getattr(h, "_implied_growth", False) for h in logger.handlers) == 1


def test_json_formatter():
    record = logging.LogRecord("implied_growth.model", logging.WARNING, __file__, 1,
                               "growth %s", ("undefined",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {"level": "WARNING", "msg": "growth undefined", "logger": "implied_growth.model"}
