"""Unit tests for the ``python -m resumedoc`` entry point and logging setup."""

import logging
import runpy
import sys
from unittest.mock import patch

import pytest

from resumedoc.logging_utils import configure_logging


@pytest.mark.unit
class TestResumedocMain:
    """Test resumedoc/__main__.py entry point."""

    def test_main_module_importable(self):
        import resumedoc.__main__  # noqa: F401

    def test_run_as_module_exits_with_main_result(self):
        with patch("resumedoc.cli.main", return_value=4), patch.object(sys, "argv", ["resumedoc", "build", "x"]):
            with pytest.raises(SystemExit) as exc_info:
                runpy.run_module("resumedoc", run_name="__main__")
        assert exc_info.value.code == 4

    def test_help(self, capsys):
        from resumedoc.cli import main

        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "build" in capsys.readouterr().out


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_string_level(self):
        package_logger = configure_logging("info")
        assert package_logger.name == "resumedoc"
        assert package_logger.level == logging.INFO
        assert len(package_logger.handlers) == 1

    def test_repeated_calls_do_not_stack_handlers(self):
        configure_logging(logging.DEBUG)
        package_logger = configure_logging(logging.DEBUG)
        assert len(package_logger.handlers) == 1

    def test_trace_format(self):
        package_logger = configure_logging(logging.DEBUG, trace_mode=True)
        assert "%(name)s" in package_logger.handlers[0].formatter._fmt

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "resumedoc.log"
        package_logger = configure_logging(logging.INFO, log_file=str(log_file))

        logging.getLogger("resumedoc.codegen").info("hello file")
        for handler in package_logger.handlers:
            handler.flush()

        assert len(package_logger.handlers) == 2
        assert "INFO: hello file" in log_file.read_text(encoding="utf-8")
