# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

from .types import MessageRole

__all__ = (
    "FunctionCall",
    "ToolCall",
    "ReplyMessage",
    "ReplyChoice",
    "ChatCompletionResponse",
)


class FunctionCall(BaseModel):
    """A function the model asked to call, plus its outcome once invoked."""

    model_config = ConfigDict(extra="ignore")

    name: str
    arguments: str | dict = "{}"
    result: JsonValue = None

    @property
    def parsed_arguments(self) -> dict:
        if isinstance(self.arguments, dict):
            return self.arguments
        if not self.arguments.strip():
            return {}
        return json.loads(self.arguments)

    def serialize(self) -> str:
        if isinstance(self.result, str):
            return self.result
        if self.result is not None:
            return json.dumps(self.result, ensure_ascii=False)
        return json.dumps(
            {"name": self.name, "arguments": self.parsed_arguments},
            ensure_ascii=False,
        )


class ToolCall(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    type: str = "function"
    function: FunctionCall


class ReplyMessage(BaseModel):
    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    role: MessageRole = MessageRole.ASSISTANT
    content: str | None = None
    function_call: FunctionCall | None = None
    tool_calls: list[ToolCall] = Field(default_factory=list)

    @field_validator("tool_calls", mode="before")
    def _validate_tool_calls(cls, v: Any) -> list:
        return [] if v is None else v

    @property
    def calls(self) -> list[FunctionCall]:
        out = [self.function_call] if self.function_call else []
        out.extend(t.function for t in self.tool_calls)
        return out


class ReplyChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = 0
    message: ReplyMessage
    finish_reason: str | None = None


class ChatCompletionResponse(BaseModel):
    """OpenAI-shaped chat-completion response.

    Only ``reply_text`` and ``reply_combined_text`` are used by the
    interceptor; the remaining fields are kept for callers that want them.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    model: str | None = None
    choices: list[ReplyChoice] = Field(default_factory=list)
    usage: dict | None = None

    def reply_text(self) -> str:
        """Text content of every choice, one choice per line."""
        return "\n".join(
            c.message.content for c in self.choices if c.message.content
        )

    def reply_combined_text(self) -> str:
        """Reply text merged with serialized function-call outcomes."""
        parts = []
        for choice in self.choices:
            if choice.message.content:
                parts.append(choice.message.content)
            parts.extend(call.serialize() for call in choice.message.calls)
        return "\n".join(parts)
