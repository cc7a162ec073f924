import json
import logging

from .config import settings


# Simple JSON formatter for line-oriented logs
class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level=None, json_logs=None):
    """
    Attach a single stream handler to the package logger.

    Streamlit re-executes the page script on every widget change, so this is
    called many times per session; the handler is only installed once.
    """
    logger = logging.getLogger("implied_growth")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    use_json = settings.LOG_JSON if json_logs is None else json_logs

    handler = next((h for h in logger.handlers if getattr(h, "_implied_growth", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._implied_growth = True
        logger.addHandler(handler)
        logger.propagate = False
    if use_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    return logger
