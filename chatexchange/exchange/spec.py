# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Declarations of chat-completion operations and interface defaults."""

import inspect
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

from .._errors import MetadataError
from ..messages.request import to_function_names

__all__ = (
    "OPERATION_ATTR",
    "DEFAULTS_ATTR",
    "OperationSpec",
    "ExchangeDefaults",
    "ExchangeInterface",
    "chat_completion",
    "chat_exchange",
)

OPERATION_ATTR = "__chat_completion__"
DEFAULTS_ATTR = "__chat_exchange__"

# bases whose members are never operations
_SKIP_MODULES = frozenset({"builtins", "abc", "typing", "typing_extensions"})


class _SamplingFields(BaseModel):
    """Model and sampling fields where empty, negative or zero means unset."""

    model_config = ConfigDict(frozen=True)

    model: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    function_names: tuple[str, ...] = ()

    @field_validator("model", mode="before")
    def _validate_model(cls, v: Any) -> str | None:
        if isinstance(v, str):
            v = v.strip()
        return v or None

    @field_validator("temperature")
    def _validate_temperature(cls, v: float | None) -> float | None:
        if v is None or v < 0:
            return None
        return v

    @field_validator("max_tokens")
    def _validate_max_tokens(cls, v: int | None) -> int | None:
        if v is None or v <= 0:
            return None
        return v

    @field_validator("function_names", mode="before")
    def _validate_function_names(cls, v: Any) -> tuple[str, ...]:
        return to_function_names(v)


class OperationSpec(_SamplingFields):
    """Metadata of a single chat-completion operation.

    Each role takes either a literal text, formatted with the call
    arguments, or the name of a prompt template rendered with them. The
    optional model and sampling fields override the interface defaults.
    """

    user: str | None = None
    user_template: str | None = None
    system: str | None = None
    system_template: str | None = None
    assistant: str | None = None
    assistant_template: str | None = None

    @model_validator(mode="after")
    def _validate_user(self) -> Self:
        if self.user and self.user_template:
            raise MetadataError(
                "An operation declares either a user message or a user "
                "template, not both",
                details={
                    "user": self.user,
                    "user_template": self.user_template,
                },
            )
        return self


class ExchangeDefaults(_SamplingFields):
    """Interface-level defaults, applied where an operation sets nothing."""


class ExchangeInterface(BaseModel):
    """Explicit description of a chat interface.

    Operations mapped to ``None`` carry no metadata; their user message is
    derived from the operation name.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    defaults: ExchangeDefaults = Field(default_factory=ExchangeDefaults)
    operations: dict[str, OperationSpec | None] = Field(default_factory=dict)
    source: type | None = Field(None, exclude=True)

    @field_validator("operations")
    def _validate_operations(cls, v: dict) -> dict:
        for name in v:
            if not name.isidentifier() or name.startswith("_"):
                raise MetadataError.from_value(
                    name,
                    expected="public identifier",
                    message=f"Invalid operation name: {name!r}",
                )
        return v

    @classmethod
    def from_class(cls, klass: type) -> "ExchangeInterface":
        """Collect the public functions declared on a class and its bases."""
        operations: dict[str, OperationSpec | None] = {}
        for base in reversed(klass.__mro__):
            if base.__module__ in _SKIP_MODULES:
                continue
            for name, attr in vars(base).items():
                if name.startswith("_") or not inspect.isfunction(attr):
                    continue
                operations[name] = getattr(attr, OPERATION_ATTR, None)

        return cls(
            name=klass.__name__,
            defaults=getattr(klass, DEFAULTS_ATTR, None) or ExchangeDefaults(),
            operations=operations,
            source=klass,
        )


def chat_completion(
    user: str | Callable | None = None,
    *,
    user_template: str | None = None,
    system: str | None = None,
    system_template: str | None = None,
    assistant: str | None = None,
    assistant_template: str | None = None,
    functions: list[str] | tuple[str, ...] | str | None = None,
    model: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
):
    """Declare a method as a chat-completion operation.

    Usable bare (``@chat_completion``) or with arguments.
    """
    func = None
    if callable(user):
        func, user = user, None

    spec = OperationSpec(
        user=user,
        user_template=user_template,
        system=system,
        system_template=system_template,
        assistant=assistant,
        assistant_template=assistant_template,
        function_names=functions,
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
    )

    def decorator(f: Callable) -> Callable:
        setattr(f, OPERATION_ATTR, spec)
        return f

    return decorator(func) if func is not None else decorator


def chat_exchange(
    model: str | type | None = None,
    *,
    temperature: float | None = None,
    max_tokens: int | None = None,
    functions: list[str] | tuple[str, ...] | str | None = None,
):
    """Declare interface-level defaults on a class."""
    klass = None
    if isinstance(model, type):
        klass, model = model, None

    defaults = ExchangeDefaults(
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
        function_names=functions,
    )

    def decorator(k: type) -> type:
        setattr(k, DEFAULTS_ATTR, defaults)
        return k

    return decorator(klass) if klass is not None else decorator
