"""Tests for configure_logging."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from formstate.application.reducer import form_state_reducer
from formstate.domain.actions import SetValueAction
from formstate.logging_setup import configure_logging


class TestConfigureLogging:
    def test_attaches_single_rich_handler(self):
        console = Console(record=True, width=200)
        logger = configure_logging(verbose=True, console=console)
        configure_logging(verbose=True, console=console)

        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert logger.name == "formstate"

    def test_reducer_debug_records_reach_console(self, control_state):
        console = Console(record=True, width=200)
        configure_logging(verbose=True, console=console)

        form_state_reducer(control_state, SetValueAction("name", "Grace"))

        assert "changed" in console.export_text()

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "formstate.log"
        logger = configure_logging(log_file=str(log_file))

        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "hello" in log_file.read_text()
        assert logger.level == logging.DEBUG
