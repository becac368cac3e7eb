"""Tests for figma_codegen.logging_config."""

import logging

from figma_codegen.logging_config import configured_log_dir, get_cli_logger, setup_logger


def _close(logger):
    for handler in logger.handlers:
        handler.close()


class TestSetupLogger:

    def test_console_only_without_filename(self):
        logger = setup_logger("figma_codegen.tests.console")
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
        assert logger.propagate is False

    def test_configured_once(self):
        first = setup_logger("figma_codegen.tests.once")
        second = setup_logger("figma_codegen.tests.once", level=logging.DEBUG)
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG
        assert second.handlers[0].level == logging.DEBUG

    def test_file_handler_uses_log_dir_set_after_import(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
        logger = setup_logger("figma_codegen.tests.file", "codegen.log")
        try:
            logger.info("hello")
            assert (tmp_path / "logs" / "codegen.log").exists()
        finally:
            _close(logger)

    def test_file_handler_defaults_to_cwd_logs(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LOG_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        logger = setup_logger("figma_codegen.tests.default_dir", "codegen.log")
        try:
            assert (tmp_path / "logs" / "codegen.log").exists()
        finally:
            _close(logger)


class TestConfiguredLogDir:

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("LOG_DIR", raising=False)
        assert configured_log_dir() is None

    def test_read_at_call_time(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        assert configured_log_dir() == tmp_path


class TestCliLogger:

    def test_verbose_sets_debug(self, monkeypatch):
        monkeypatch.delenv("LOG_DIR", raising=False)
        assert get_cli_logger(verbose=True).level == logging.DEBUG
        assert get_cli_logger(verbose=False).level == logging.INFO
