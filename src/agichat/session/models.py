"""Data models for the session controller.

These models define messages and user configuration independently of how
they are rendered or persisted.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a message."""

    USER = "user"
    MODEL = "model"


class Message(BaseModel):
    """One entry of the conversation. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who authored the message")
    text: str = Field(description="Message text")


class ResponseStyle(str, Enum):
    """How long and detailed replies should be."""

    BALANCED = "balanced"
    CONCISE = "concise"
    DETAILED = "detailed"


class AppSettings(BaseModel):
    """User configuration forwarded with every generation request.

    Unknown fields are ignored on load; missing fields take their defaults.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    model: str = Field(
        default="",
        description="Model identifier passed to the provider; empty uses the provider default"
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature"
    )
    max_output_tokens: int | None = Field(
        default=None,
        ge=1,
        description="Reply length cap; None uses the provider default"
    )
    system_instruction: str = Field(
        default="",
        description="Persona instruction; empty uses the built-in prompt"
    )
    user_name: str = Field(
        default="",
        description="How the assistant should address the user; empty for anonymous"
    )
    response_style: ResponseStyle = Field(
        default=ResponseStyle.BALANCED,
        description="Preferred reply length and depth"
    )


DEFAULT_SETTINGS = AppSettings()
