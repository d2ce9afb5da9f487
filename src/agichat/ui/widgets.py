"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Navigation buttons and their active state
- Rendering of view panels and chat messages
- Log rendering and level filtering
"""

from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message as TextualMessage
from textual.widgets import Button, RichLog, Static, TextArea

from ..session import VIEW_PANELS, Message, Role, ViewPanel, ViewState
from .config import (
    INPUT_HISTORY_MAX_SIZE,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    MODEL_LABEL,
    NAV_VIEWS,
    USER_LABEL,
    LogLevel,
)


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button."""

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="primary").with_tooltip(
            "Send message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Terminals do not pass modifiers with Enter, so ctrl+j submits.
        Up/Down at the edges of the text walk the input history.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        lines = text_area.text.split("\n")
        return text_area.cursor_location == (len(lines) - 1, len(lines[-1]))

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index == -1:
                return
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text.strip()
        if not value:
            return
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        text_area.text = ""
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class NavSidebar(Vertical):
    """One button per view plus New Chat; highlights the active view."""

    class Navigate(TextualMessage):
        """Posted when the user picks a view."""

        def __init__(self, view: ViewState) -> None:
            super().__init__()
            self.view = view

    class NewChat(TextualMessage):
        """Posted when the user asks for a fresh conversation."""

    def compose(self):
        for view in NAV_VIEWS:
            yield Button(VIEW_PANELS[view].label, id=f"nav-{view.value}")
        yield Button(
            VIEW_PANELS[ViewState.CONVERSATION].label,
            id=f"nav-{ViewState.CONVERSATION.value}",
        )
        yield Button("New Chat", id="new-chat-btn").with_tooltip("Start a new chat (Ctrl+N)")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        event.stop()
        if button_id == "new-chat-btn":
            self.post_message(self.NewChat())
        elif button_id.startswith("nav-"):
            self.post_message(self.Navigate(ViewState(button_id[4:])))

    def set_active(self, active: ViewState) -> None:
        for view in ViewState:
            button = self.query_one(f"#nav-{view.value}", Button)
            button.set_class(view == active, "-active")


class PromptButton(Button):
    """Button carrying a ready-made prompt."""

    class Selected(TextualMessage):
        """Posted when a prompt button is pressed."""

        def __init__(self, prompt: str) -> None:
            super().__init__()
            self.prompt = prompt

    def __init__(self, prompt: str, **kwargs) -> None:
        super().__init__(prompt, classes="prompt-button", **kwargs)
        self.prompt = prompt

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.Selected(self.prompt))


class ViewContent(VerticalScroll):
    """Renders the static content of the active view."""

    BORDER_TITLE = "AGI"

    async def show(self, panel: ViewPanel) -> None:
        """Replace the displayed content with panel."""
        await self.remove_children()
        self.border_title = panel.label
        widgets = [
            Static(panel.title, classes="view-title"),
            Static(panel.tagline, classes="view-tagline"),
        ]
        for card in panel.cards:
            body = Text()
            body.append(card.title, style="bold")
            body.append("\n")
            body.append(card.body)
            widgets.append(Static(body, classes="view-card"))
        widgets.extend(PromptButton(prompt) for prompt in panel.prompts)
        await self.mount_all(widgets)
        self.scroll_home(animate=False)


class ChatTranscript(VerticalScroll):
    """Scrollable list of conversation messages."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0
        self._generation: int | None = None

    async def sync(self, messages: tuple[Message, ...], generation: int) -> None:
        """Bring the display in line with the session.

        Within one generation the session only grows, so new messages are
        appended. A new generation (the chat was reset) means a full redraw.
        """
        if generation != self._generation or len(messages) < self._rendered:
            await self.remove_children()
            self._rendered = 0
            self._generation = generation
        new = messages[self._rendered:]
        if new:
            await self.mount_all([self._render_message(msg) for msg in new])
            self._rendered = len(messages)
            self.scroll_end(animate=False)
        self.border_subtitle = f"{len(messages)} messages" if messages else "Conversation history"

    def _render_message(self, msg: Message) -> Vertical:
        if msg.role == Role.USER:
            header, css_class = USER_LABEL, "user-message"
        else:
            header, css_class = MODEL_LABEL, "model-message"
        timestamp = datetime.now().strftime("%H:%M:%S")
        return Vertical(
            Static(f"{header} [{timestamp}]", classes="message-header", markup=False),
            Static(msg.text, classes="message-content", markup=False),
            classes=f"chat-message {css_class}",
        )


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Hidden by default; shown with --log-level debug/info or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.INFO, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        self.display = False

    def log_record(self, component: str, message: str, level: int) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Logger name the record came from
            message: Formatted log message
            level: Numeric level of the record
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        line = Text()
        line.append(datetime.now().strftime(LOG_TIMESTAMP_FORMAT), style="dim")
        line.append(" ")
        line.append(f"{LogLevel.name(level):<5}", style=level_colors.get(level, "red"))
        line.append(f" [{component}] ", style="magenta")
        line.append(message)
        self.write(line)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
