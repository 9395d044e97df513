"""Tests for logger setup."""

import json

from loguru import logger

from barbell.core.logger import setup_logger


class TestSetupLogger:
    """Tests for the loguru sinks."""

    def test_console_only(self):
        try:
            assert len(setup_logger()) == 1
        finally:
            setup_logger()

    def test_file_sink_writes_json_lines(self, tmp_path):
        log_file = tmp_path / "barbell.log"
        try:
            handler_ids = setup_logger("debug", str(log_file))
            assert len(handler_ids) == 2
            logger.info("Loaded 2x45 lbs")
            logger.remove()
        finally:
            setup_logger()

        records = [json.loads(line)["record"] for line in log_file.read_text().splitlines()]
        messages = [record["message"] for record in records]
        assert "Loaded 2x45 lbs" in messages
        assert any(message.startswith("Logging configured (level=DEBUG") for message in messages)

    def test_level_filters_file_sink(self, tmp_path):
        log_file = tmp_path / "barbell.log"
        try:
            setup_logger("warning", str(log_file))
            logger.info("not written")
            logger.warning("written")
            logger.remove()
        finally:
            setup_logger()

        messages = [json.loads(line)["record"]["message"] for line in log_file.read_text().splitlines()]
        assert messages == ["written"]
