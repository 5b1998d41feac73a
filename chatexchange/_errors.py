# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "ExchangeError",
    "MetadataError",
    "RenderError",
    "BackendError",
    "ExchangeNotFoundError",
    "ExchangeExistsError",
)


class ExchangeError(Exception):
    default_message: ClassVar[str] = "Chat exchange error"
    default_status_code: ClassVar[int] = 500
    __slots__ = ("message", "details", "status_code")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}
        self.status_code = status_code or type(self).default_status_code

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__


class MetadataError(ExchangeError):
    """Raised when an operation's declared metadata cannot be applied."""

    default_message = "Invalid chat completion metadata"
    default_status_code = 422
    __slots__ = ()

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Create an error for a declared or passed value that cannot be used."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)


class RenderError(ExchangeError):
    """Raised when a prompt template cannot be rendered."""

    default_message = "Prompt template rendering failed"
    default_status_code = 422
    __slots__ = ()


class BackendError(ExchangeError):
    """Raised by chat backends when a completion cannot be produced."""

    default_message = "Chat backend failed"
    default_status_code = 502
    __slots__ = ()


class ExchangeNotFoundError(ExchangeError):
    default_message = "Exchange interface not found"
    default_status_code = 404
    __slots__ = ()


class ExchangeExistsError(ExchangeError):
    default_message = "Exchange interface already registered"
    default_status_code = 409
    __slots__ = ()
