"""Tests for shared.log and shared.logging_config."""

import json
import logging

import pytest

from shared.log import TRACE, create_logger
from shared.logging_config import configure_logging


class TestCreateLogger:
    """Test create_logger."""

    def test_component_prefix(self, caplog):
        _, _, log_info, _, _ = create_logger("Engine")

        with caplog.at_level(logging.INFO, logger="versiondiff.engine"):
            log_info("Listed 3 records")

        assert caplog.records[0].getMessage() == "[versiondiff Engine] Listed 3 records"
        assert caplog.records[0].name == "versiondiff.engine"

    def test_no_component(self, caplog):
        _, _, _, log_warn, _ = create_logger()

        with caplog.at_level(logging.WARNING, logger="versiondiff"):
            log_warn("careful")

        assert caplog.records[0].getMessage() == "[versiondiff] careful"
        assert caplog.records[0].levelno == logging.WARNING

    def test_levels(self, caplog):
        log_trace, log_debug, log_info, log_warn, log_error = create_logger("Listing Export")

        with caplog.at_level(TRACE, logger="versiondiff.listing_export"):
            log_trace("t")
            log_debug("d")
            log_info("i")
            log_warn("w")
            log_error("e")

        assert [r.levelno for r in caplog.records] == [
            TRACE, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR
        ]


class TestConfigureLogging:
    """Test configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_sets_level_and_single_handler(self):
        configure_logging("debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_defaults_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_json_output_fields(self, capsys):
        configure_logging("info", json_output=True)

        _, _, log_info, _, _ = create_logger("Engine")
        log_info("hello")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["level"] == "INFO"
        assert payload["name"] == "versiondiff.engine"
        assert payload["msg"] == "[versiondiff Engine] hello"
        assert "ts" in payload
