"""Tests for logging helpers."""

import logging

import pytest

from src.core.logging import log_with_household_context


@pytest.mark.unit
class TestLogWithHouseholdContext:
    """Tests for log_with_household_context function."""

    def test_household_id_and_extra_attached(self, caplog):
        """Household id and extra fields land on the log record."""
        logger = logging.getLogger("tests.household")

        with caplog.at_level(logging.INFO, logger="tests.household"):
            log_with_household_context(logger, "info", "Weekly report built", household_id="house_1", week_number=2)

        (record,) = caplog.records
        assert record.getMessage() == "Weekly report built"
        assert record.levelno == logging.INFO
        assert record.household_id == "house_1"
        assert record.week_number == 2

    def test_without_household_id(self, caplog):
        """Without a household id only the extra fields are attached."""
        logger = logging.getLogger("tests.household")

        with caplog.at_level(logging.DEBUG, logger="tests.household"):
            log_with_household_context(logger, "debug", "Loads computed", member_count=3)

        (record,) = caplog.records
        assert record.levelno == logging.DEBUG
        assert record.member_count == 3
        assert not hasattr(record, "household_id")
