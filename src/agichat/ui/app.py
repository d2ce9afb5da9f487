"""Main Textual TUI application.

Orchestrates the UI components and forwards every user action to the
ChatController. Widgets are redrawn from controller state whenever the
conversation, the active view or the thinking label changes.
"""

import asyncio
import logging

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Static

from ..errors import SettingsError
from ..logging_utils import LOGGER_NAME, configure_logging
from ..session import FALLBACK_MESSAGE, AppSettings, ChatController, ViewState, panel_for
from .callbacks import DebugPanelHandler
from .screens import SettingsScreen
from .styles import APP_CSS
from .themes import AGI_MIDNIGHT
from .widgets import (
    ChatInputBar,
    ChatTranscript,
    DebugPanel,
    LogLevel,
    NavSidebar,
    PromptButton,
    ViewContent,
)


class AgiTextualApp(App):
    """Textual TUI for the AGI chat client."""

    CSS = APP_CSS
    TITLE = "AGI Project"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+n", "new_chat", "New Chat"),
        Binding("ctrl+s", "open_settings", "Settings"),
        Binding("ctrl+r", "copy_last_response", "Copy Reply"),
        Binding("ctrl+d", "toggle_debug", "Log"),
        Binding("f1", "show_view('home')", "Home", show=False),
        Binding("f2", "show_view('features')", "Features", show=False),
        Binding("f3", "show_view('examples')", "Examples", show=False),
        Binding("f4", "show_view('safety')", "Safety", show=False),
        Binding("f5", "show_view('conversation')", "Chat", show=False),
    ]

    def __init__(self, controller: ChatController, log_level: str | None = None) -> None:
        super().__init__()
        self._controller = controller
        self._log_level = log_level
        self._log_handler: logging.Handler | None = None
        self._unsubscribers: list = []
        self._shown_view: ViewState | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="body"):
            yield NavSidebar(id="sidebar")
            with Vertical(id="main"):
                yield ViewContent(id="view-content")
                yield ChatTranscript(id="chat-transcript")
                yield Static("", id="thinking")
                yield DebugPanel(id="debug-panel")
                yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(AGI_MIDNIGHT)
        self.theme = "agi-midnight"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.log_level = LogLevel.from_string(self._log_level or "info")
        if self._log_level is not None and log_panel.log_level <= LogLevel.INFO:
            log_panel.show()
        self._log_handler = DebugPanelHandler(log_panel, self)
        configure_logging(log_panel.log_level, handler=self._log_handler)

        controller = self._controller
        self._unsubscribers = [
            controller.conversation.subscribe(self._schedule_refresh),
            controller.views.subscribe(lambda _view: self._schedule_refresh()),
        ]
        controller.indicator.add_listener(self._on_thinking_tick)

        self._update_subtitle()
        self._schedule_refresh()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Release listeners, the indicator task and the log handler."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._controller.indicator.remove_listener(self._on_thinking_tick)
        self._controller.indicator.close()
        if self._log_handler is not None:
            logging.getLogger(LOGGER_NAME).removeHandler(self._log_handler)
            self._log_handler = None

    def _update_subtitle(self) -> None:
        settings = self._controller.settings.current
        model = settings.model or getattr(self._controller.gateway, "model_name", "default")
        self.sub_title = f"{model} | {settings.response_style.value}"

    def _schedule_refresh(self) -> None:
        self.call_later(self._refresh)

    async def _refresh(self) -> None:
        """Redraw navigation, content and transcript from controller state."""
        views = self._controller.views
        conversation = self._controller.conversation
        active = views.active
        messages = conversation.messages

        self.query_one("#sidebar", NavSidebar).set_active(active)

        content = self.query_one("#view-content", ViewContent)
        if active != self._shown_view:
            await content.show(panel_for(active))
            self._shown_view = active

        transcript = self.query_one("#chat-transcript", ChatTranscript)
        await transcript.sync(messages, conversation.generation)
        show_transcript = active == ViewState.CONVERSATION and bool(messages)
        content.display = not show_transcript
        transcript.display = show_transcript

        self._update_thinking(self._controller.indicator.label)

    def _update_thinking(self, label: str) -> None:
        conversation = self._controller.conversation
        thinking = self.query_one("#thinking", Static)
        thinking.display = conversation.pending
        if conversation.queued:
            label = f"{label}  ({conversation.queued} queued)"
        thinking.update(label)

    def _on_thinking_tick(self, label: str) -> None:
        self._update_thinking(label)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        self._send(event.value)

    def on_prompt_button_selected(self, event: PromptButton.Selected) -> None:
        self._send(event.prompt)

    def on_nav_sidebar_navigate(self, event: NavSidebar.Navigate) -> None:
        self._controller.navigate(event.view)

    def on_nav_sidebar_new_chat(self, event: NavSidebar.NewChat) -> None:
        self.action_new_chat()

    @work(group="send")
    async def _send(self, text: str) -> None:
        """Run one send as a background async worker.

        Sends are not exclusive: a second send queues behind the first
        inside the conversation store.
        """
        try:
            await self._controller.send_message(text)
        except asyncio.CancelledError:
            self.notify("Request cancelled", severity="warning", timeout=2)
            raise
        if self._controller.conversation.last_reply() == FALLBACK_MESSAGE:
            self.notify("Generation failed", severity="error", timeout=5)

    def action_new_chat(self) -> None:
        self._controller.new_chat()
        self.notify("New chat started", timeout=2)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def action_show_view(self, view: str) -> None:
        self._controller.navigate(ViewState(view))

    def action_open_settings(self) -> None:
        self.push_screen(
            SettingsScreen(self._controller.settings.current),
            self._on_settings_closed,
        )

    def _on_settings_closed(self, settings: AppSettings | None) -> None:
        if settings is None:
            return
        try:
            self._controller.save_settings(settings)
        except SettingsError as e:
            self.notify(str(e), severity="error", timeout=5)
            return
        self._update_subtitle()
        self.notify("Settings saved", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last model reply to clipboard."""
        response = self._controller.conversation.last_reply()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Reply copied")
        else:
            self.notify("No reply to copy", severity="warning")


async def run_textual_tui(controller: ChatController, log_level: str | None = None) -> None:
    """Run the Textual TUI.

    Args:
        controller: Controller with settings already loaded
        log_level: Log panel level (debug/info/warning/error), None to start hidden
    """
    app = AgiTextualApp(controller, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
