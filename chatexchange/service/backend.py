# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Contracts of the collaborators the interceptor talks to."""

from collections.abc import Awaitable, Sequence
from typing import Any, Protocol, runtime_checkable

from ..messages.request import ChatCompletionRequest

__all__ = (
    "ChatReply",
    "ChatBackend",
    "TemplateRenderer",
)


@runtime_checkable
class ChatReply(Protocol):
    """Response surface consumed by the interceptor.

    Either accessor may return the text directly or an awaitable of it.
    """

    def reply_text(self) -> str | Awaitable[str]: ...

    def reply_combined_text(self) -> str | Awaitable[str]: ...


@runtime_checkable
class ChatBackend(Protocol):
    def chat(self, request: ChatCompletionRequest) -> Awaitable[ChatReply]: ...


@runtime_checkable
class TemplateRenderer(Protocol):
    def render(self, name: str, args: Sequence[Any]) -> str: ...
