"""Conversation history and the request lifecycle.

ConversationStore is the only writer of the session. Each send is a
two-phase append: the user entry is permanent as soon as it is added, and
exactly one model entry (the reply, or the fallback text) follows it once
the gateway call settles.

Concurrency policy: sends are serialized. A send started while another is
pending waits its turn on a lock, so the session always alternates
user/model. reset_session() starts a new epoch; replies and queued sends
belonging to an older epoch are discarded instead of leaking into the new
conversation.
"""

import asyncio
import contextlib
import logging
from collections.abc import Callable

from .gateway import ResponseGateway
from .models import Message, Role
from .settings import SettingsStore
from .thinking import ThinkingIndicator
from .views import ViewController, ViewState

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Critical system failure in cognitive module."

ChangeListener = Callable[[], None]


class ConversationStore:
    """Owns the ordered message history and the pending flag."""

    def __init__(
        self,
        gateway: ResponseGateway,
        settings: SettingsStore,
        views: ViewController | None = None,
        indicator: ThinkingIndicator | None = None,
    ) -> None:
        self._gateway = gateway
        self._settings = settings
        self._views = views
        self._indicator = indicator
        self._messages: list[Message] = []
        self._pending = False
        self._epoch = 0
        self._queued = 0
        self._lock = asyncio.Lock()
        self._listeners: list[ChangeListener] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the session, oldest first."""
        return tuple(self._messages)

    @property
    def pending(self) -> bool:
        """True while a gateway call is in flight."""
        return self._pending

    @property
    def queued(self) -> int:
        """Number of sends waiting for the in-flight one to finish."""
        return self._queued

    @property
    def generation(self) -> int:
        """Counter bumped by every reset_session()."""
        return self._epoch

    def last_reply(self) -> str | None:
        """Text of the most recent model message, if any."""
        for msg in reversed(self._messages):
            if msg.role == Role.MODEL:
                return msg.text
        return None

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Conversation listener failed")

    async def send_message(self, text: str) -> None:
        """Send text and record the reply.

        The view switches to the conversation before anything else happens.
        When no other send is pending, the user entry is appended before
        the first suspension point.
        """
        if self._views is not None:
            self._views.navigate(ViewState.CONVERSATION)

        epoch = self._epoch
        self._queued += 1
        try:
            await self._lock.acquire()
        finally:
            self._queued -= 1

        try:
            if epoch != self._epoch:
                logger.info("Dropping message queued before the session was reset")
                return
            await self._exchange(text, epoch)
        finally:
            self._lock.release()

    async def _exchange(self, text: str, epoch: int) -> None:
        history = tuple(self._messages)
        self._messages.append(Message(role=Role.USER, text=text))
        self._pending = True
        self._notify()

        thinking = self._indicator if self._indicator is not None else contextlib.nullcontext()
        try:
            try:
                async with thinking:
                    reply = await self._gateway.generate(text, history, self._settings.current)
            except Exception:
                logger.exception("Generation failed, answering with fallback message")
                reply = FALLBACK_MESSAGE

            if epoch == self._epoch:
                self._messages.append(Message(role=Role.MODEL, text=reply))
            else:
                logger.info("Discarding reply that settled after the session was reset")
        finally:
            self._pending = False
            self._notify()

    def reset_session(self) -> None:
        """Start a new chat: empty session, nothing pending, conversation view."""
        self._epoch += 1
        self._messages = []
        self._pending = False
        if self._indicator is not None:
            self._indicator.close()
        if self._views is not None:
            self._views.navigate(ViewState.CONVERSATION)
        logger.info("Session reset")
        self._notify()
