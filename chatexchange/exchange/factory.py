# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ..service.backend import ChatBackend, TemplateRenderer
from .interceptor import ExchangeInterceptor
from .spec import ExchangeInterface, OperationSpec

if TYPE_CHECKING:
    from .registry import ExchangeRegistry

__all__ = ("ChatClientFactory",)

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _exchange_method(
    name: str,
    operation: OperationSpec | None,
    interceptor: ExchangeInterceptor,
    signature: inspect.Signature | None,
):
    def method(self, *args, **kwargs):
        if signature is not None:
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            args = bound.args[1:] + tuple(bound.kwargs.values())
        elif kwargs:
            raise TypeError(
                f"{name}() takes positional arguments only, "
                f"got {sorted(kwargs)}"
            )
        return interceptor.intercept(name, operation, args)

    method.__name__ = name
    return method


class ChatClientFactory:
    """Creates client objects whose operations call a chat backend.

    Construction never talks to the backend; requests are only built and
    sent when an operation is called.
    """

    def __init__(
        self,
        backend: ChatBackend,
        renderer: TemplateRenderer | None = None,
    ):
        self.backend = backend
        self.renderer = renderer

    @overload
    def create_client(self, interface: type[T]) -> T: ...

    @overload
    def create_client(self, interface: ExchangeInterface) -> Any: ...

    def create_client(self, interface):
        if isinstance(interface, ExchangeInterface):
            descriptor = interface
        elif inspect.isclass(interface):
            descriptor = ExchangeInterface.from_class(interface)
        else:
            raise TypeError(
                "Interface must be a class or an ExchangeInterface, "
                f"got {type(interface).__name__}"
            )

        interceptor = ExchangeInterceptor(
            self.backend, self.renderer, descriptor.defaults
        )
        source = descriptor.source
        namespace: dict[str, Any] = {
            "__init__": lambda self: None,
            "__module__": __name__,
            "_interceptor": interceptor,
            "_interface": descriptor,
        }
        for name, operation in descriptor.operations.items():
            signature = (
                inspect.signature(getattr(source, name))
                if source is not None
                else None
            )
            namespace[name] = _exchange_method(
                name, operation, interceptor, signature
            )

        bases = (source,) if source is not None else ()
        client_cls = type(f"{descriptor.name}Client", bases, namespace)
        logger.debug(
            f"Created {client_cls.__name__} with operations "
            f"{list(descriptor.operations)}"
        )
        return client_cls()

    def create_clients(self, registry: "ExchangeRegistry") -> dict[str, Any]:
        """Create one client per interface held by a registry."""
        return {name: self.create_client(i) for name, i in registry.items()}
