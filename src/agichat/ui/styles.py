"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
"""

APP_CSS = """
Screen {
    background: $background;
}

#body {
    height: 1fr;
}

/* Sidebar navigation */
#sidebar {
    width: 26;
    height: 100%;
    background: $surface;
    border-right: tall $border;
    padding: 1 1;
}

#sidebar Button {
    width: 100%;
    margin-bottom: 1;
    border: none;
    background: $surface;
    color: $text-muted;

    &:hover {
        background: $panel;
        color: $foreground;
    }

    &.-active {
        background: $primary;
        color: $foreground;
        text-style: bold;
    }
}

#nav-conversation {
    margin-top: 1;
}

#new-chat-btn {
    dock: bottom;
    background: $primary 60%;
    color: $foreground;
}

/* Main column */
#main {
    width: 1fr;
    height: 100%;
}

#view-content, #chat-transcript {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;
}

.view-title {
    text-style: bold;
    color: $foreground;
    margin-top: 1;
}

.view-tagline {
    color: $text-muted;
    margin-bottom: 1;
}

.view-card {
    background: $surface;
    border: round $border;
    padding: 0 1;
    margin-bottom: 1;
}

.prompt-button {
    width: 100%;
    height: auto;
    margin-bottom: 1;
    content-align: left middle;
}

/* Chat messages */
.chat-message {
    height: auto;
    padding: 0 1;
    margin: 1 0 0 0;
}

.user-message {
    border-left: thick $primary;
    background: $primary 10%;
}

.model-message {
    border-left: thick $accent;
    background: $surface;
}

.message-header {
    text-style: bold;
    color: $text-muted;
}

.model-message .message-header {
    color: $accent;
}

#thinking {
    height: 1;
    padding: 0 2;
    color: $accent;
    text-style: bold;
}

/* Log panel */
#debug-panel {
    height: 10;
    background: $surface;
    border: round $warning 50%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
}

/* Input bar */
#chat-input-bar {
    height: auto;
    max-height: 8;
    padding: 0 1;
}

#chat-input {
    width: 1fr;
    height: auto;
    min-height: 3;
    max-height: 8;
    border: round $border;

    &:focus {
        border: round $primary;
    }
}

#send-btn {
    width: 10;
    margin-left: 1;
}
"""
