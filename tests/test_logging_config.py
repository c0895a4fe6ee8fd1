import json
import logging

from deso_api.config import DesoConfig, default_config
from deso_api.logs import JsonFormatter, configure_logging


def test_logging_level_config():
    level = getattr(logging, default_config.log_level.upper(), logging.INFO)
    assert level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )


def test_json_formatter_includes_extras():
    record = logging.LogRecord("deso_api.api.client", logging.WARNING, __file__, 1, "failed %s", ("x",), None)
    record.endpoint = "/v0/get-txn"
    record.error = "ConnectError"
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {
        "level": "WARNING",
        "message": "failed x",
        "name": "deso_api.api.client",
        "endpoint": "/v0/get-txn",
        "error": "ConnectError",
    }


def test_configure_logging_json_and_plain():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        handler = configure_logging(DesoConfig(log_level="debug", log_format="json"))
        assert isinstance(handler.formatter, JsonFormatter)
        assert root.level == logging.DEBUG
        handler = configure_logging(DesoConfig(log_level="bogus", log_format="plain"))
        assert not isinstance(handler.formatter, JsonFormatter)
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
