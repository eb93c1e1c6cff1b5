# ABOUTME: Tests for the loguru sink configuration.
# ABOUTME: Covers level filtering and the optional log file sink.

from pathlib import Path

from loguru import logger

from whisper_core.logger import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        """Messages at or above the level should reach the file sink."""
        log_file = tmp_path / "logs" / "core.log"
        setup_logging("INFO", log_file)

        logger.info("matched someone")
        logger.debug("hidden detail")
        logger.complete()
        logger.remove()

        content = log_file.read_text()
        assert "matched someone" in content
        assert "hidden detail" not in content

    def test_level_is_case_insensitive(self, tmp_path: Path) -> None:
        """Lower-case level names should be accepted."""
        log_file = tmp_path / "core.log"
        setup_logging("debug", log_file)

        logger.debug("visible detail")
        logger.remove()

        assert "visible detail" in log_file.read_text()
