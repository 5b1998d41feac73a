# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .factory import ChatClientFactory
from .interceptor import ExchangeInterceptor
from .registry import ExchangeRegistry
from .spec import (
    ExchangeDefaults,
    ExchangeInterface,
    OperationSpec,
    chat_completion,
    chat_exchange,
)

__all__ = (
    "ChatClientFactory",
    "ExchangeDefaults",
    "ExchangeInterceptor",
    "ExchangeInterface",
    "ExchangeRegistry",
    "OperationSpec",
    "chat_completion",
    "chat_exchange",
)
