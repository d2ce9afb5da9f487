"""
agichat: a terminal conversational client for generative-intelligence services.

The package follows Parnas's information hiding principles,
where each module hides a specific design decision:
- session: conversation, view and settings state (the controller core)
- llm: which generative service answers and how it is called
- storage: where user configuration is persisted
- ui / cli: how the user drives the controller
"""

__version__ = "0.1.0"

from .errors import AgiChatError, GenerationError, SettingsError, StorageError
from .session import (
    FALLBACK_MESSAGE,
    AppSettings,
    ChatController,
    ConversationStore,
    Message,
    ResponseGateway,
    Role,
    SettingsStore,
    ViewController,
    ViewState,
    create_controller,
)

__all__ = [
    "FALLBACK_MESSAGE",
    "AgiChatError",
    "AppSettings",
    "ChatController",
    "ConversationStore",
    "GenerationError",
    "Message",
    "ResponseGateway",
    "Role",
    "SettingsError",
    "SettingsStore",
    "StorageError",
    "ViewController",
    "ViewState",
    "create_controller",
]
