"""Bridges from the controller core into the TUI.

Hides how log records reach the log panel. Records may be emitted from
worker threads, so delivery goes through call_from_thread when needed.
"""

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import DebugPanel


class DebugPanelHandler(logging.Handler):
    """logging.Handler that writes records to the DebugPanel."""

    def __init__(self, panel: "DebugPanel", app: "App") -> None:
        super().__init__(level=logging.DEBUG)
        self.panel = panel
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.exc_info and record.exc_info[1] is not None:
                exc = record.exc_info[1]
                message = f"{message} ({type(exc).__name__}: {exc})"
            component = record.name.rsplit(".", 1)[-1]
            if self.app._thread_id != threading.get_ident():
                self.app.call_from_thread(self.panel.log_record, component, message, record.levelno)
            else:
                self.panel.log_record(component, message, record.levelno)
        except Exception:
            self.handleError(record)
