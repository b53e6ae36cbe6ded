import logging

import pytest

from ladder.core.logging import get_logger, log_timing, setup_logging


def test_get_logger_namespaces_under_ladder():
    assert get_logger("ladder.rating.estimator").name == "ladder.rating.estimator"
    assert get_logger("scripts.report").name == "ladder.scripts.report"


def test_setup_logging_configures_ladder_logger(tmp_path):
    log_file = tmp_path / "ladder.log"
    logger = setup_logging(level="debug", log_file=log_file, format_style="simple")
    assert logger.name == "ladder"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    get_logger("ladder.test").info("hello file")
    for handler in logger.handlers:
        handler.flush()
    assert "INFO: hello file" in log_file.read_text()


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown logging level"):
        setup_logging(level="loud")


def test_setup_logging_rejects_unknown_format():
    with pytest.raises(ValueError, match="format_style"):
        setup_logging(format_style="xml")


def test_log_timing_reports_completion(caplog):
    caplog.set_level(logging.DEBUG, logger="ladder")
    logger = get_logger("ladder.test")
    with log_timing(logger, "unit of work"):
        pass
    assert any(m.startswith("Completed unit of work") for m in caplog.messages)


def test_log_timing_reports_failure(caplog):
    caplog.set_level(logging.DEBUG, logger="ladder")
    logger = get_logger("ladder.test")
    with pytest.raises(ValueError):
        with log_timing(logger, "bad work"):
            raise ValueError("boom")
    assert any("Failed bad work" in m and "boom" in m for m in caplog.messages)
