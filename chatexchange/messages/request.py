# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import ChatMessage

__all__ = ("ChatCompletionRequest", "to_function_names")


def to_function_names(v: Any) -> tuple[str, ...]:
    """Normalize one name or a sequence of names, dropping empty ones."""
    if v is None:
        return ()
    if isinstance(v, str):
        return (v,) if v else ()
    return tuple(i for i in v if i)


class ChatCompletionRequest(BaseModel):
    """A chat-completion request assembled for a single invocation.

    Fields left as ``None`` are omitted from the payload so the backend
    applies its own defaults.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[ChatMessage, ...] = Field(min_length=1)
    model: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    function_names: tuple[str, ...] = ()

    @field_validator("function_names", mode="before")
    def _validate_function_names(cls, v: Any) -> tuple[str, ...]:
        return to_function_names(v)

    @property
    def has_functions(self) -> bool:
        return bool(self.function_names)

    def to_payload(self) -> dict[str, Any]:
        """Dump to an OpenAI-style request body.

        Function names are not part of the payload: the backend resolves them
        to function definitions before sending.
        """
        payload = {"messages": [m.chat_msg for m in self.messages]}
        for key in ("model", "temperature", "max_tokens"):
            if (value := getattr(self, key)) is not None:
                payload[key] = value
        return payload
