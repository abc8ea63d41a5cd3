"""Unit tests for logging setup and the operation logger."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from pointkit.exceptions import InvalidArgumentError
from pointkit.utils.logging import OperationLogger, configure_logging


@pytest.fixture
def run_log() -> tuple[OperationLogger, Mock]:
    logger = Mock()
    return OperationLogger(logger, "hull"), logger


class TestOperationLogger:
    """Tests for OperationLogger events."""

    def test_points_loaded(self, run_log):
        operation_logger, logger = run_log
        operation_logger.log_points_loaded(Path("cloud.json"), 6, True)
        logger.info.assert_called_once_with(
            "Points loaded",
            operation="hull",
            path="cloud.json",
            point_count=6,
            coordinates="integer",
        )

    def test_operation_complete_carries_details(self, run_log):
        operation_logger, logger = run_log
        operation_logger.log_operation_complete(6, 4, orientation="clockwise")
        logger.info.assert_called_once_with(
            "Operation complete",
            operation="hull",
            point_count=6,
            result_size=4,
            orientation="clockwise",
        )

    def test_operation_error(self, run_log):
        operation_logger, logger = run_log
        operation_logger.log_operation_error(InvalidArgumentError("too few points"))
        logger.error.assert_called_once_with(
            "Operation failed",
            operation="hull",
            error="too few points",
            error_type="InvalidArgumentError",
        )

    def test_result_saved_is_debug(self, run_log):
        operation_logger, logger = run_log
        operation_logger.log_result_saved(Path("hull.json"))
        logger.debug.assert_called_once()
        logger.info.assert_not_called()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(console_level="LOUD")

    def test_file_receives_json_events(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Checkpoint", step=3)

        text = log_file.read_text()
        assert '"event": "Checkpoint"' in text
        assert '"step": 3' in text
