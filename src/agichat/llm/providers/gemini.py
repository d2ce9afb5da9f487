"""Google Gemini LLM provider implementation.

Uses the official Google GenAI SDK for async chat completions.
Reference: https://github.com/googleapis/python-genai

Gemini can return empty responses when a reply is safety-filtered; those
come back as empty content and are treated as failures upstream.
"""

from typing import Any

from google import genai
from google.genai import types

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

# Chat roles as Gemini names them; system messages become the instruction
_GEMINI_ROLES = {"user": "user", "assistant": "model"}

_BLOCK_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"

DEFAULT_SAFETY_SETTINGS = [
    types.SafetySetting(category=category, threshold=_BLOCK_THRESHOLD)
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]


def split_messages(messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
    """Separate the system instruction from the conversation turns."""
    instruction = [m.content for m in messages if m.role == "system"]
    contents = [
        types.Content(role=_GEMINI_ROLES[m.role], parts=[types.Part(text=m.content)])
        for m in messages
        if m.role in _GEMINI_ROLES
    ]
    return ("\n\n".join(instruction) or None), contents


def reply_text(response: Any) -> str:
    """Concatenate the text parts of the first candidate ("" when filtered)."""
    candidates = response.candidates or []
    if not candidates or candidates[0].content is None:
        return ""
    parts = candidates[0].content.parts or []
    return "".join(part.text for part in parts if getattr(part, "text", None))


def token_usage(response: Any) -> dict[str, int] | None:
    meta = response.usage_metadata
    if meta is None:
        return None
    return {
        "prompt_tokens": meta.prompt_token_count or 0,
        "completion_tokens": meta.candidates_token_count or 0,
        "total_tokens": meta.total_token_count or 0,
    }


class GeminiProvider(LLMProvider):
    """Gemini chat through the google-genai async client.

    Hidden design decisions:
    - Role names (assistant is "model", system is a separate instruction)
    - Safety thresholds applied to every request
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        **client_kwargs: Any
    ):
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Ask Gemini for the next model turn.

        Extra kwargs are passed to GenerateContentConfig.
        """
        model_name = model or self._model
        instruction, contents = split_messages(messages)

        config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_tokens,
            system_instruction=instruction,
            safety_settings=DEFAULT_SAFETY_SETTINGS,
            **kwargs
        )
        response = await self._client.aio.models.generate_content(
            model=model_name,
            contents=contents,
            config=config,
        )
        return LLMResponse(
            content=reply_text(response),
            model=model_name,
            usage=token_usage(response),
        )

    async def close(self) -> None:
        """Nothing to release; the GenAI client owns no persistent connection."""
