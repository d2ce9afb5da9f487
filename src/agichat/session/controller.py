"""Session/view state controller.

Composes the stores a front end drives. Every user action (navigation,
send, new chat, settings edit) maps to one method here, so the TUI and the
CLI stay thin.
"""

import logging

from ..storage import KeyValueStore
from .conversation import ConversationStore
from .gateway import ResponseGateway
from .models import AppSettings
from .settings import SettingsStore
from .thinking import TICK_INTERVAL, ThinkingIndicator
from .views import ViewController, ViewState

logger = logging.getLogger(__name__)


class ChatController:
    """One instance per process, built by create_controller()."""

    def __init__(
        self,
        settings: SettingsStore,
        views: ViewController,
        conversation: ConversationStore,
        gateway: ResponseGateway,
        indicator: ThinkingIndicator,
    ) -> None:
        self.settings = settings
        self.views = views
        self.conversation = conversation
        self.gateway = gateway
        self.indicator = indicator

    async def send_message(self, text: str) -> None:
        await self.conversation.send_message(text)

    def new_chat(self) -> None:
        self.conversation.reset_session()

    def navigate(self, view: ViewState) -> None:
        self.views.navigate(view)

    def save_settings(self, settings: AppSettings) -> None:
        self.settings.save(settings)

    async def aclose(self) -> None:
        """Tear down: stop the indicator and close the gateway."""
        self.indicator.close()
        await self.gateway.close()


def create_controller(
    storage: KeyValueStore,
    gateway: ResponseGateway,
    tick_interval: float = TICK_INTERVAL,
) -> ChatController:
    """Build the controller with settings loaded from storage.

    Args:
        storage: Backend holding persisted configuration
        gateway: Service that answers prompts
        tick_interval: Seconds between thinking-indicator frames
    """
    settings = SettingsStore(storage)
    views = ViewController()
    indicator = ThinkingIndicator(interval=tick_interval)
    conversation = ConversationStore(
        gateway=gateway,
        settings=settings,
        views=views,
        indicator=indicator,
    )
    logger.debug("Controller created (storage=%s)", storage.backend_type)
    return ChatController(settings, views, conversation, gateway, indicator)
