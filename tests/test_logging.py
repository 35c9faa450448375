"""Tests for logging configuration."""

import logging
import re


def test_setup_logging_returns_logger():
    """setup_logging returns a configured Logger instance."""
    from xkpwgen.logging_config import setup_logging

    logger = setup_logging()
    assert isinstance(logger, logging.Logger)
    assert logger.name == "xkpwgen"


def test_setup_logging_default_level_is_info():
    """Default logging level is INFO."""
    from xkpwgen.logging_config import setup_logging

    logger = setup_logging()
    assert logger.level == logging.INFO


def test_setup_logging_verbose_sets_debug():
    """verbose=True sets level to DEBUG."""
    from xkpwgen.logging_config import setup_logging

    logger = setup_logging(verbose=True)
    assert logger.level == logging.DEBUG


def test_setup_logging_quiet_sets_warning():
    """quiet=True sets level to WARNING."""
    from xkpwgen.logging_config import setup_logging

    logger = setup_logging(quiet=True)
    assert logger.level == logging.WARNING


def test_setup_logging_repeated_calls_do_not_stack_handlers(tmp_path):
    from xkpwgen.logging_config import setup_logging

    setup_logging(log_file=str(tmp_path / "a.log"))
    logger = setup_logging(log_file=str(tmp_path / "b.log"))
    assert len(logger.handlers) == 1


def test_setup_logging_writes_to_file(tmp_path):
    """log_file parameter creates a file handler."""
    from xkpwgen.logging_config import setup_logging

    log_path = tmp_path / "test.log"
    logger = setup_logging(log_file=str(log_path))
    logger.info("test message")
    for handler in logger.handlers:
        handler.flush()
    content = log_path.read_text()
    assert "test message" in content


def test_module_loggers_propagate_to_file(tmp_path):
    """Records from xkpwgen submodules reach the package log file."""
    from xkpwgen.logging_config import setup_logging
    from xkpwgen.wordlist import load_wordlist

    log_path = tmp_path / "test.log"
    logger = setup_logging(log_file=str(log_path))
    load_wordlist("slang")
    for handler in logger.handlers:
        handler.flush()
    assert "xkpwgen.wordlist" in log_path.read_text()


def test_log_format_includes_timestamp_and_level(tmp_path):
    """Log entries include a timestamp and the log level."""
    from xkpwgen.logging_config import setup_logging

    log_path = tmp_path / "test.log"
    logger = setup_logging(log_file=str(log_path))
    logger.warning("level check")
    for handler in logger.handlers:
        handler.flush()
    content = log_path.read_text()
    assert re.search(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", content)
    assert "WARNING" in content


def test_cli_has_log_file_flag(tmp_path):
    """CLI accepts --log-file and records the run."""
    from click.testing import CliRunner
    from xkpwgen.cli import cli

    log_path = tmp_path / "run.log"
    runner = CliRunner()
    result = runner.invoke(cli, ["--log-file", str(log_path), "-n", "2"])
    assert result.exit_code == 0
    logging.getLogger("xkpwgen").handlers[0].flush()
    assert "Generated 2 passphrase(s)" in log_path.read_text()
