import json
import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from retail.shared.utils.logger import (
    LOG_NAME,
    JsonFormatter,
    LoggingConfig,
    get_logger,
    init_logging,
    init_logging_from_config,
)


@pytest.fixture(autouse=True)
def _detach_handlers():
    yield
    root = logging.getLogger(LOG_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def test_get_logger_uses_prefix() -> None:
    assert get_logger().name == LOG_NAME
    assert get_logger("domain.cart").name == f"{LOG_NAME}.domain.cart"


def test_init_logging_with_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "app.log"

    root = init_logging(level="INFO", file=str(log_file), console_level="WARNING", file_level="DEBUG")

    assert root.level == logging.DEBUG
    assert log_file.exists()
    assert sum(isinstance(h, TimedRotatingFileHandler) for h in root.handlers) == 1


def test_reinit_does_not_duplicate_handlers(tmp_path) -> None:
    log_file = str(tmp_path / "app.log")
    init_logging(file=log_file)
    root = init_logging(file=log_file)
    assert len(root.handlers) == 2


def test_file_disabled() -> None:
    root = init_logging(file=None, console=True)
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0], TimedRotatingFileHandler)


def test_init_from_config(tmp_path) -> None:
    root = init_logging_from_config({
        "level": "WARNING",
        "console": False,
        "file": str(tmp_path / "x.log"),
        "file_level": "ERROR",
        "suppress": {"noisy.lib": "ERROR"},
    })

    assert [type(h) for h in root.handlers] == [TimedRotatingFileHandler]
    assert root.handlers[0].level == logging.ERROR
    assert logging.getLogger("noisy.lib").level == logging.ERROR


def test_json_formatter_includes_extra() -> None:
    record = logging.LogRecord(LOG_NAME, logging.WARNING, __file__, 10, "hello %s", ("world",), None)
    record.customer = "Bob"
    record.amount = object()

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "hello world"
    assert payload["level"] == "WARNING"
    assert payload["customer"] == "Bob"
    assert isinstance(payload["amount"], str)


def test_config_from_mapping_ignores_unknown_keys() -> None:
    cfg = LoggingConfig.from_mapping({"level": "DEBUG", "file": None, "colour": "yes", "json": True})
    assert cfg.level == "DEBUG"
    assert cfg.file is None
    assert cfg.json is True
    assert LoggingConfig.from_mapping(None).file == "logs/checkout.log"
