"""Session/view state controller.

Module structure (each module hides a design decision):
- models.py: message and configuration records
- settings.py: where configuration is persisted
- views.py: which content panels exist and what they show
- gateway.py: how the generative service is asked
- thinking.py: the pending-state animation task
- conversation.py: history ordering and the request lifecycle
- controller.py: composition of the above for front ends
"""

from .controller import ChatController, create_controller
from .conversation import FALLBACK_MESSAGE, ConversationStore
from .gateway import EchoGateway, ProviderGateway, ResponseGateway
from .models import DEFAULT_SETTINGS, AppSettings, Message, ResponseStyle, Role
from .settings import SETTINGS_KEY, SettingsStore
from .thinking import ThinkingIndicator
from .views import VIEW_PANELS, ViewController, ViewPanel, ViewState, panel_for

__all__ = [
    "DEFAULT_SETTINGS",
    "FALLBACK_MESSAGE",
    "SETTINGS_KEY",
    "VIEW_PANELS",
    "AppSettings",
    "ChatController",
    "ConversationStore",
    "EchoGateway",
    "Message",
    "ProviderGateway",
    "ResponseGateway",
    "ResponseStyle",
    "Role",
    "SettingsStore",
    "ThinkingIndicator",
    "ViewController",
    "ViewPanel",
    "ViewState",
    "create_controller",
    "panel_for",
]
