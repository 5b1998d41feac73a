# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
from collections.abc import Iterator

from .._errors import ExchangeExistsError, ExchangeNotFoundError
from .spec import ExchangeInterface

__all__ = ("ExchangeRegistry",)

logger = logging.getLogger(__name__)


class ExchangeRegistry:
    """Interfaces declared at startup, keyed by name."""

    def __init__(self, *interfaces: type | ExchangeInterface):
        self.registry: dict[str, ExchangeInterface] = {}
        for i in interfaces:
            self.register(i)

    def register(self, interface: type | ExchangeInterface):
        """Add an interface. Returns its argument, so it works as a decorator."""
        if isinstance(interface, ExchangeInterface):
            descriptor = interface
        elif isinstance(interface, type):
            descriptor = ExchangeInterface.from_class(interface)
        else:
            raise TypeError(
                "Input interface is not a class or an ExchangeInterface"
            )

        if descriptor.name in self.registry:
            raise ExchangeExistsError(
                f"Exchange interface '{descriptor.name}' is already registered",
                details={"name": descriptor.name},
            )
        self.registry[descriptor.name] = descriptor
        logger.debug(
            f"Registered exchange interface {descriptor.name} "
            f"({len(descriptor.operations)} operations)"
        )
        return interface

    def get(self, name: str) -> ExchangeInterface:
        try:
            return self.registry[name]
        except KeyError as e:
            raise ExchangeNotFoundError(
                f"Exchange interface '{name}' is not registered",
                details={"name": name},
                cause=e,
            ) from e

    def items(self):
        return self.registry.items()

    def __contains__(self, name: str) -> bool:
        return name in self.registry

    def __iter__(self) -> Iterator[str]:
        return iter(self.registry)

    def __len__(self) -> int:
        return len(self.registry)
