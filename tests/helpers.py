"""Test doubles shared by the session tests."""
import asyncio
from collections.abc import Sequence

from agichat.session import (
    AppSettings,
    ConversationStore,
    Message,
    ResponseGateway,
    SettingsStore,
    ThinkingIndicator,
    ViewController,
)
from agichat.storage import create_kv_store


class FakeGateway(ResponseGateway):
    """Scriptable gateway recording every call.

    With gate=True each call waits until release.set() so tests can observe
    the pending state.
    """

    def __init__(
        self,
        replies: list[str] | None = None,
        error: Exception | None = None,
        gate: bool = False,
    ) -> None:
        self.calls: list[tuple[str, tuple[Message, ...], AppSettings]] = []
        self._replies = list(replies or [])
        self.error = error
        self.release = asyncio.Event() if gate else None
        self.closed = False

    async def generate(
        self,
        prompt: str,
        history: Sequence[Message],
        settings: AppSettings,
    ) -> str:
        self.calls.append((prompt, tuple(history), settings))
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        if self._replies:
            return self._replies.pop(0)
        return f"reply to {prompt}"

    async def close(self) -> None:
        self.closed = True


def make_store(
    gateway: ResponseGateway,
    settings: SettingsStore | None = None,
    views: ViewController | None = None,
    indicator: ThinkingIndicator | None = None,
) -> ConversationStore:
    """Build a ConversationStore with in-memory settings by default."""
    return ConversationStore(
        gateway=gateway,
        settings=settings or SettingsStore(create_kv_store("memory")),
        views=views,
        indicator=indicator,
    )
