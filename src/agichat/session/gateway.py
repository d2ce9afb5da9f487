"""Boundary to the external generative service.

The rest of the controller sees one operation, generate(prompt, history,
settings), which returns reply text or raises. How the request is
phrased, which provider answers, and what failure modes it has are hidden
here.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..errors import GenerationError
from ..llm import ChatMessage, LLMProvider
from ..prompts import STYLE_HINTS, get_system_prompt
from .models import AppSettings, Message, Role

logger = logging.getLogger(__name__)

_PROVIDER_ROLES = {
    Role.USER: "user",
    Role.MODEL: "assistant",
}


class ResponseGateway(ABC):
    """Contract for anything that can answer a prompt."""

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        history: Sequence[Message],
        settings: AppSettings,
    ) -> str:
        """Produce a reply to prompt.

        Args:
            prompt: The new user text
            history: Earlier messages, oldest first, not including prompt
            settings: Configuration in effect for this request

        Returns:
            Generated reply text

        Raises:
            GenerationError: On any transport, quota or content-policy failure
        """

    async def close(self) -> None:
        """Release resources held by the gateway."""


def build_system_instruction(settings: AppSettings) -> str:
    """Compose the system instruction sent ahead of the conversation."""
    parts = [settings.system_instruction.strip() or get_system_prompt()]
    hint = STYLE_HINTS.get(settings.response_style.value, "")
    if hint:
        parts.append(hint)
    if settings.user_name.strip():
        parts.append(f"The user's name is {settings.user_name.strip()}.")
    return "\n\n".join(parts)


def build_chat_messages(
    prompt: str,
    history: Sequence[Message],
    settings: AppSettings,
) -> list[ChatMessage]:
    """Convert the conversation into provider-neutral chat messages."""
    messages = [ChatMessage(role="system", content=build_system_instruction(settings))]
    messages.extend(
        ChatMessage(role=_PROVIDER_ROLES[msg.role], content=msg.text)
        for msg in history
    )
    messages.append(ChatMessage(role="user", content=prompt))
    return messages


class ProviderGateway(ResponseGateway):
    """Gateway backed by an LLMProvider.

    Hidden design decisions:
    - System instruction composition from settings
    - Role mapping (model -> assistant)
    - Collapsing every provider failure, including empty replies, into
      GenerationError
    """

    def __init__(self, llm: LLMProvider) -> None:
        self._llm = llm

    @property
    def model_name(self) -> str:
        return self._llm.model

    async def generate(
        self,
        prompt: str,
        history: Sequence[Message],
        settings: AppSettings,
    ) -> str:
        messages = build_chat_messages(prompt, history, settings)
        logger.debug(
            "Generating reply: %d history message(s), model=%s",
            len(history), settings.model or self._llm.model,
        )
        try:
            response = await self._llm.chat_completion(
                messages,
                model=settings.model or None,
                temperature=settings.temperature,
                max_tokens=settings.max_output_tokens,
            )
        except Exception as e:
            raise GenerationError(f"{type(e).__name__}: {e}") from e

        if not response.content.strip():
            raise GenerationError("Provider returned an empty reply")
        if response.usage:
            logger.debug("Token usage: %s", response.usage)
        return response.content

    async def close(self) -> None:
        await self._llm.close()


class EchoGateway(ResponseGateway):
    """Offline gateway that repeats the prompt back.

    Used by --offline runs to exercise the interface without credentials.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self._delay = delay

    @property
    def model_name(self) -> str:
        return "echo"

    async def generate(
        self,
        prompt: str,
        history: Sequence[Message],
        settings: AppSettings,
    ) -> str:
        if self._delay:
            await asyncio.sleep(self._delay)
        turn = sum(1 for msg in history if msg.role == Role.USER) + 1
        return f"(echo #{turn}) {prompt}"
