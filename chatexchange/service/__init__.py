# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .backend import ChatBackend, ChatReply, TemplateRenderer
from .prompts import PromptManager

__all__ = (
    "ChatBackend",
    "ChatReply",
    "PromptManager",
    "TemplateRenderer",
)
