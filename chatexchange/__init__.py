# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    BackendError,
    ExchangeError,
    ExchangeExistsError,
    ExchangeNotFoundError,
    MetadataError,
    RenderError,
)
from .exchange import (
    ChatClientFactory,
    ExchangeDefaults,
    ExchangeInterceptor,
    ExchangeInterface,
    ExchangeRegistry,
    OperationSpec,
    chat_completion,
    chat_exchange,
)
from .messages import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    MessageRole,
    format_chat_message,
)
from .service import ChatBackend, ChatReply, PromptManager, TemplateRenderer
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

__all__ = (
    "__version__",
    "BackendError",
    "ChatBackend",
    "ChatClientFactory",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "ChatReply",
    "ExchangeDefaults",
    "ExchangeError",
    "ExchangeExistsError",
    "ExchangeInterceptor",
    "ExchangeInterface",
    "ExchangeNotFoundError",
    "ExchangeRegistry",
    "MessageRole",
    "MetadataError",
    "OperationSpec",
    "PromptManager",
    "RenderError",
    "TemplateRenderer",
    "chat_completion",
    "chat_exchange",
    "format_chat_message",
    "logger",
)
