# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import json

import pytest
from pydantic import ValidationError

from chatexchange.messages.request import ChatCompletionRequest
from chatexchange.messages.response import ChatCompletionResponse, FunctionCall
from chatexchange.messages.types import ChatMessage, MessageRole


class TestChatMessage:
    def test_factories(self):
        assert ChatMessage.user("hi").role is MessageRole.USER
        assert ChatMessage.system("be kind").role is MessageRole.SYSTEM
        assert ChatMessage.assistant("ok").role is MessageRole.ASSISTANT

    def test_chat_msg(self):
        assert ChatMessage.user("hi").chat_msg == {
            "role": "user",
            "content": "hi",
        }

    def test_immutable(self):
        msg = ChatMessage.user("hi")
        with pytest.raises(ValidationError):
            msg.content = "changed"

    def test_role_from_string(self):
        assert ChatMessage(role="assistant", content="x").role is (
            MessageRole.ASSISTANT
        )

    def test_invalid_role(self):
        with pytest.raises(ValidationError):
            ChatMessage(role="tool", content="x")


class TestChatCompletionRequest:
    def test_defaults_unset(self):
        request = ChatCompletionRequest(messages=[ChatMessage.user("hi")])
        assert request.model is None
        assert request.temperature is None
        assert request.max_tokens is None
        assert request.function_names == ()
        assert not request.has_functions

    def test_requires_a_message(self):
        with pytest.raises(ValidationError):
            ChatCompletionRequest(messages=[])

    def test_function_names_normalized(self):
        request = ChatCompletionRequest(
            messages=[ChatMessage.user("hi")], function_names=["a", "b"]
        )
        assert request.function_names == ("a", "b")
        assert request.has_functions
        single = ChatCompletionRequest(
            messages=[ChatMessage.user("hi")], function_names="lookup"
        )
        assert single.function_names == ("lookup",)

    @pytest.mark.parametrize("names", ["", [""], ["", ""], None])
    def test_empty_function_names_mean_none(self, names):
        request = ChatCompletionRequest(
            messages=[ChatMessage.user("hi")], function_names=names
        )
        assert request.function_names == ()
        assert not request.has_functions

    def test_empty_names_dropped_from_list(self):
        request = ChatCompletionRequest(
            messages=[ChatMessage.user("hi")], function_names=["", "lookup"]
        )
        assert request.function_names == ("lookup",)

    def test_frozen(self):
        request = ChatCompletionRequest(messages=[ChatMessage.user("hi")])
        with pytest.raises(ValidationError):
            request.model = "gpt-4"

    def test_to_payload_omits_unset(self):
        request = ChatCompletionRequest(
            messages=[ChatMessage.user("hi"), ChatMessage.system("short")],
            temperature=0.0,
            function_names=["search"],
        )
        assert request.to_payload() == {
            "messages": [
                {"role": "user", "content": "hi"},
                {"role": "system", "content": "short"},
            ],
            "temperature": 0.0,
        }


class TestChatCompletionResponse:
    def test_reply_text(self, completion):
        assert completion.reply_text() == "It is sunny."

    def test_reply_combined_text_serializes_call(self, completion):
        text, call = completion.reply_combined_text().split("\n")
        assert text == "It is sunny."
        assert json.loads(call) == {
            "name": "weather",
            "arguments": {"city": "Paris"},
        }

    def test_combined_text_prefers_function_result(self, completion_payload):
        call = completion_payload["choices"][0]["message"]["function_call"]
        call["result"] = {"temp": 21}
        response = ChatCompletionResponse.model_validate(completion_payload)
        assert response.reply_combined_text() == 'It is sunny.\n{"temp": 21}'

    def test_tool_calls(self):
        response = ChatCompletionResponse.model_validate(
            {
                "choices": [
                    {
                        "message": {
                            "role": "assistant",
                            "content": None,
                            "tool_calls": [
                                {
                                    "id": "call_1",
                                    "type": "function",
                                    "function": {
                                        "name": "search",
                                        "arguments": "{}",
                                        "result": "3 results",
                                    },
                                }
                            ],
                        }
                    }
                ]
            }
        )
        assert response.reply_text() == ""
        assert response.reply_combined_text() == "3 results"

    def test_multiple_choices_joined(self):
        response = ChatCompletionResponse.model_validate(
            {
                "choices": [
                    {"index": 0, "message": {"content": "one"}},
                    {"index": 1, "message": {"content": None}},
                    {"index": 2, "message": {"content": "two"}},
                ]
            }
        )
        assert response.reply_text() == "one\ntwo"

    def test_empty_response(self):
        response = ChatCompletionResponse()
        assert response.reply_text() == ""
        assert response.reply_combined_text() == ""


class TestFunctionCall:
    def test_parsed_arguments(self):
        assert FunctionCall(name="f", arguments='{"a": 1}').parsed_arguments == {
            "a": 1
        }
        assert FunctionCall(name="f", arguments={"a": 1}).parsed_arguments == {
            "a": 1
        }
        assert FunctionCall(name="f", arguments="  ").parsed_arguments == {}

    def test_invalid_arguments_raise(self):
        with pytest.raises(json.JSONDecodeError):
            FunctionCall(name="f", arguments="{not json").serialize()
