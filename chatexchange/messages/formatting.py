# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import dataclasses
import re
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from .._errors import MetadataError
from .types import MessageRole

__all__ = (
    "is_record",
    "expand_record",
    "record_fields",
    "format_chat_message",
    "message_from_name",
)

_UPPER = re.compile(r"([A-Z])")


def is_record(value: Any) -> bool:
    """True for dataclass instances, named tuples and pydantic models."""
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(value, "_fields")


def record_fields(value: Any) -> dict[str, Any]:
    """Field names to values, in declaration order."""
    if isinstance(value, BaseModel):
        return {k: getattr(value, k) for k in type(value).model_fields}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return dict(zip(value._fields, value))
    raise MetadataError.from_value(
        value,
        expected="record",
        message=f"Cannot expand {type(value).__name__} into record fields",
    )


def expand_record(value: Any) -> list[Any]:
    """Field values of a record, in declaration order."""
    return list(record_fields(value).values())


def format_chat_message(
    role: MessageRole | str, content: str, args: Sequence[Any] | None
) -> str:
    """Apply positional arguments to a declared message text.

    Text with ``{`` and ``}`` is treated as a format string; a lone record
    argument is expanded into its fields first. Without placeholders, user
    messages get the non-null arguments appended and other roles are left
    unchanged.
    """
    if not args:
        return content

    if "{" in content and "}" in content:
        values, named = list(args), {}
        if len(args) == 1 and is_record(args[0]):
            named = record_fields(args[0])
            values = list(named.values())
        try:
            return content.format(*values, **named)
        except (IndexError, KeyError, ValueError, AttributeError) as e:
            raise MetadataError(
                f"Cannot format {MessageRole(role).value} message: {e}",
                details={"content": content, "args": len(values)},
                cause=e,
            ) from e

    if MessageRole(role) is MessageRole.USER:
        return content + "".join(f" {a}" for a in args if a is not None)
    return content


def message_from_name(name: str) -> str:
    """Derive a user message from an operation name.

    ``getWeatherReport`` -> ``get Weather Report``.
    """
    return _UPPER.sub(r" \1", name).strip()
