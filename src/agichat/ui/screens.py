"""Modal screens for the TUI.

This module hides the design decisions about:
- Settings dialog appearance (CSS, layout)
- Field-by-field editing and validation feedback
- Keyboard shortcuts for dialogs

The dialog returns a validated AppSettings, or None when cancelled.
"""

from pydantic import ValidationError
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from ..session import DEFAULT_SETTINGS, AppSettings, ResponseStyle


class SettingsScreen(ModalScreen[AppSettings | None]):
    """Modal dialog editing every AppSettings field."""

    CSS = """
    SettingsScreen {
        align: center middle;
        background: $background 70%;
    }

    #settings-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        border: tall $primary;
        background: $surface;
        padding: 1 2;
    }

    #settings-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    #settings-dialog Label {
        color: $text-muted;
        margin-top: 1;
    }

    #settings-error {
        color: $error;
        height: auto;
        margin-top: 1;
    }

    #settings-buttons {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    #settings-buttons Button {
        margin: 0 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
        Binding("ctrl+s", "save", "Save", show=False),
    ]

    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._settings = settings

    def compose(self) -> ComposeResult:
        s = self._settings
        with Vertical(id="settings-dialog"):
            yield Static("Settings", id="settings-title")
            yield Label("Model (empty for provider default)")
            yield Input(value=s.model, placeholder="gemini-2.5-flash", id="field-model")
            yield Label("Temperature (0.0 - 2.0)")
            yield Input(value=str(s.temperature), id="field-temperature")
            yield Label("Max output tokens (empty for no limit)")
            yield Input(
                value="" if s.max_output_tokens is None else str(s.max_output_tokens),
                id="field-max_output_tokens",
            )
            yield Label("Response style")
            yield Select(
                [(style.value.capitalize(), style.value) for style in ResponseStyle],
                value=s.response_style.value,
                allow_blank=False,
                id="field-response_style",
            )
            yield Label("Your name")
            yield Input(value=s.user_name, placeholder="Anonymous", id="field-user_name")
            yield Label("System instruction (empty for built-in persona)")
            yield Input(value=s.system_instruction, id="field-system_instruction")
            yield Static("", id="settings-error")
            with Horizontal(id="settings-buttons"):
                yield Button("Save", id="btn-save", variant="success")
                yield Button("Defaults", id="btn-defaults", variant="warning")
                yield Button("Cancel", id="btn-cancel", variant="error")

    def _collect(self) -> dict:
        def value(field: str) -> str:
            return self.query_one(f"#field-{field}", Input).value.strip()

        max_tokens = value("max_output_tokens")
        return {
            "model": value("model"),
            "temperature": value("temperature") or DEFAULT_SETTINGS.temperature,
            "max_output_tokens": max_tokens or None,
            "response_style": self.query_one("#field-response_style", Select).value,
            "user_name": value("user_name"),
            "system_instruction": value("system_instruction"),
        }

    def _fill(self, settings: AppSettings) -> None:
        self.query_one("#field-model", Input).value = settings.model
        self.query_one("#field-temperature", Input).value = str(settings.temperature)
        self.query_one("#field-max_output_tokens", Input).value = (
            "" if settings.max_output_tokens is None else str(settings.max_output_tokens)
        )
        self.query_one("#field-response_style", Select).value = settings.response_style.value
        self.query_one("#field-user_name", Input).value = settings.user_name
        self.query_one("#field-system_instruction", Input).value = settings.system_instruction

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-save":
            self.action_save()
        elif event.button.id == "btn-defaults":
            self._fill(DEFAULT_SETTINGS)
        elif event.button.id == "btn-cancel":
            self.action_cancel()

    def action_save(self) -> None:
        """Validate the form; dismiss with the new settings when valid."""
        try:
            settings = AppSettings.model_validate(self._collect())
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            self.query_one("#settings-error", Static).update(f"{field}: {error['msg']}")
            return
        self.dismiss(settings)

    def action_cancel(self) -> None:
        self.dismiss(None)
