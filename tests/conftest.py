# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from unittest.mock import AsyncMock, MagicMock

import pytest

from chatexchange.messages.response import ChatCompletionResponse
from chatexchange.service.prompts import PromptManager


@pytest.fixture
def completion_payload():
    """An OpenAI-shaped completion carrying both text and a function call."""
    return {
        "id": "chatcmpl-123",
        "model": "gpt-4",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": "It is sunny.",
                    "function_call": {
                        "name": "weather",
                        "arguments": '{"city": "Paris"}',
                    },
                },
                "finish_reason": "function_call",
            }
        ],
        "usage": {
            "prompt_tokens": 10,
            "completion_tokens": 5,
            "total_tokens": 15,
        },
    }


@pytest.fixture
def completion(completion_payload):
    return ChatCompletionResponse.model_validate(completion_payload)


@pytest.fixture
def backend(completion):
    """A chat backend whose replies are recorded for inspection."""
    mock = MagicMock()
    mock.chat = AsyncMock(return_value=completion)
    return mock


@pytest.fixture
def prompts():
    return PromptManager(
        templates={
            "greet": "Hello {{ args[0] }}",
            "persona": "You are {{ args[0] }}'s assistant.",
            "forecast": "Forecast for {{ city }} on {{ day }}",
        }
    )
