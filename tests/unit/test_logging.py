"""Tests for logging configuration."""

import logging

from json_log_formatter import JSONFormatter

from textprep.core.logging import StructuredFormatter, configure_logging


def make_record(**extra):
    record = logging.LogRecord("textprep.test", logging.INFO, __file__, 1, "Trained", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for the plain text formatter."""

    def test_plain(self):
        assert StructuredFormatter().format(make_record()) == "[INFO] Trained"

    def test_context(self):
        record = make_record(
            recipe_name="reviews", step_id="stem_1", context={"columns": ["text"]}
        )
        assert (
            StructuredFormatter().format(record)
            == "[INFO] recipe=reviews step=stem_1 columns=['text'] Trained"
        )


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_and_formatter(self):
        configure_logging(level="debug")
        logger = logging.getLogger("textprep")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_json(self):
        configure_logging(level="WARNING", json_format=True, recipe_name="reviews")
        handler = logging.getLogger("textprep").handlers[0]

        assert isinstance(handler.formatter, JSONFormatter)
        record = make_record()
        assert handler.filter(record)
        assert record.recipe_name == "reviews"
