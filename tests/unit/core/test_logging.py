"""Tests for lh-avg structured logging."""

import json
import logging
from collections.abc import Iterator
from io import StringIO

import pytest

from lh_avg.core.logging import (
    LH_AVG_VERSION,
    add_common_fields,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    """Reset logging state before and after each test."""
    reset_logging()
    yield
    reset_logging()


class TestProcessors:
    """Tests for custom processors."""

    def test_add_common_fields(self) -> None:
        """Test the version is added without overriding an explicit value."""
        event = add_common_fields(None, "info", {"event": "x"})
        assert event["lh_avg_version"] == LH_AVG_VERSION

        event = add_common_fields(None, "info", {"lh_avg_version": "0.0.1"})
        assert event["lh_avg_version"] == "0.0.1"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level(self) -> None:
        """Test the root logger level follows the argument."""
        configure_logging("DEBUG", stream=StringIO())
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self) -> None:
        """Test unknown level names fall back to WARNING."""
        configure_logging("chatty", stream=StringIO())
        assert logging.getLogger().level == logging.WARNING

    def test_json_output(self) -> None:
        """Test events are rendered as JSON lines."""
        stream = StringIO()
        configure_logging("INFO", json_output=True, stream=stream)
        get_logger("lh_avg.test").info("scores_computed", count=2)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "scores_computed"
        assert record["count"] == 2
        assert record["level"] == "info"
        assert record["lh_avg_version"] == LH_AVG_VERSION

    def test_level_filters_events(self) -> None:
        """Test events below the configured level are dropped."""
        stream = StringIO()
        configure_logging("WARNING", json_output=True, stream=stream)
        get_logger("lh_avg.test").debug("scores_received")
        assert stream.getvalue() == ""

    def test_replaces_handlers(self) -> None:
        """Test reconfiguring does not stack handlers."""
        configure_logging(stream=StringIO())
        configure_logging(stream=StringIO())
        assert len(logging.getLogger().handlers) == 1
