"""Terminal UI module for agichat.

Provides a Textual-based TUI driving the ChatController.

Module structure (Parnas principle - each module hides a design decision):
- widgets.py: Custom widgets (navigation, view content, transcript, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Modal dialogs (settings editor)
- callbacks.py: Log record delivery into the TUI
- app.py: Application orchestration (user interaction flow)
"""

from .app import AgiTextualApp, run_textual_tui
from .callbacks import DebugPanelHandler
from .config import LogLevel
from .widgets import ChatInputBar, ChatTranscript, DebugPanel, NavSidebar, ViewContent

__all__ = [
    "AgiTextualApp",
    "ChatInputBar",
    "ChatTranscript",
    "DebugPanel",
    "DebugPanelHandler",
    "LogLevel",
    "NavSidebar",
    "ViewContent",
    "run_textual_tui",
]
