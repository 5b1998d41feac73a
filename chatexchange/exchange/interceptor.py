# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import inspect
import logging
from collections.abc import Awaitable, Sequence
from typing import Any

from .._errors import MetadataError
from ..config import settings
from ..messages.formatting import format_chat_message, message_from_name
from ..messages.request import ChatCompletionRequest
from ..messages.types import ChatMessage, MessageRole
from ..service.backend import ChatBackend, ChatReply, TemplateRenderer
from .spec import ExchangeDefaults, OperationSpec

__all__ = ("ExchangeInterceptor",)

logger = logging.getLogger(__name__)


class ExchangeInterceptor:
    """Turns an operation call into a chat-completion request and reply.

    The interceptor keeps no per-call state: it holds the backend, the
    template renderer and the interface defaults, all fixed at creation.
    """

    def __init__(
        self,
        backend: ChatBackend,
        renderer: TemplateRenderer | None = None,
        defaults: ExchangeDefaults | None = None,
    ):
        self.backend = backend
        self.renderer = renderer
        self.defaults = defaults or ExchangeDefaults()

    def _resolve(
        self,
        role: MessageRole,
        literal: str | None,
        template: str | None,
        args: Sequence[Any],
    ) -> str:
        if not literal and template:
            if self.renderer is None:
                raise MetadataError(
                    f"No template renderer configured for {role.value} "
                    f"template '{template}'",
                    details={"template": template},
                )
            return self.renderer.render(template, args)
        return format_chat_message(role, literal or "", args)

    def build_messages(
        self,
        method: str,
        operation: OperationSpec | None,
        args: Sequence[Any],
    ) -> list[ChatMessage]:
        if operation is None:
            return [ChatMessage.user(message_from_name(method))]

        messages = [
            ChatMessage.user(
                self._resolve(
                    MessageRole.USER,
                    operation.user,
                    operation.user_template,
                    args,
                )
            )
        ]
        system = self._resolve(
            MessageRole.SYSTEM,
            operation.system,
            operation.system_template,
            args,
        )
        if system:
            messages.append(ChatMessage.system(system))
        assistant = self._resolve(
            MessageRole.ASSISTANT,
            operation.assistant,
            operation.assistant_template,
            args,
        )
        if assistant:
            messages.append(ChatMessage.assistant(assistant))
        return messages

    def build_request(
        self,
        method: str,
        operation: OperationSpec | None,
        args: Sequence[Any],
    ) -> ChatCompletionRequest:
        messages = self.build_messages(method, operation, args)
        op = operation or OperationSpec()
        d = self.defaults
        return ChatCompletionRequest(
            messages=messages,
            model=op.model or d.model,
            temperature=(
                op.temperature if op.temperature is not None else d.temperature
            ),
            max_tokens=op.max_tokens or d.max_tokens,
            function_names=op.function_names or d.function_names,
        )

    def intercept(
        self,
        method: str,
        operation: OperationSpec | None,
        args: Sequence[Any] = (),
    ) -> Awaitable[str]:
        """Assemble the request now, return the awaitable reply text.

        Metadata and template errors are raised here, before anything is
        sent; backend errors surface when the result is awaited.
        """
        request = self.build_request(method, operation, tuple(args))
        if settings.CHATEXCHANGE_LOG_PAYLOADS:
            logger.debug(f"{method}: {request.to_payload()}")
        else:
            logger.debug(
                f"{method}: {len(request.messages)} messages, "
                f"model={request.model}, functions={list(request.function_names)}"
            )
        return self._exchange(request)

    async def _exchange(self, request: ChatCompletionRequest) -> str:
        response: ChatReply = await self.backend.chat(request)
        if request.has_functions:
            text = response.reply_combined_text()
        else:
            text = response.reply_text()
        if inspect.isawaitable(text):
            text = await text
        return text
