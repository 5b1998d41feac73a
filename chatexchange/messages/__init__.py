# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .formatting import (
    expand_record,
    format_chat_message,
    is_record,
    message_from_name,
    record_fields,
)
from .request import ChatCompletionRequest
from .response import (
    ChatCompletionResponse,
    FunctionCall,
    ReplyChoice,
    ReplyMessage,
    ToolCall,
)
from .types import ChatMessage, MessageRole

__all__ = (
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "FunctionCall",
    "MessageRole",
    "ReplyChoice",
    "ReplyMessage",
    "ToolCall",
    "expand_record",
    "format_chat_message",
    "is_record",
    "message_from_name",
    "record_fields",
)
