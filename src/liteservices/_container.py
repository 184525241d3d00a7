from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from ._errors import DependencyNotFound


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    T = TypeVar("T")

    # Zero-argument callable building (or returning) a service
    Provider = Callable[[], T]


class Container:
    """Minimal DI container.

    - maps service names to providers
    - resolve a name by calling its provider
    - register again under a name to replace it

    Subclass it to pre-populate the services your app guarantees:

        class Injectables(Container):
            def __init__(self) -> None:
                super().__init__({"clock": existing_instance(SystemClock())})
    """

    def __init__(self, services: Mapping[str, Provider[Any]] | None = None) -> None:
        # Own copy: the caller's mapping must not be able to change our bindings
        self._services: dict[str, Provider[Any]] = dict(services or {})
        self._lock = threading.RLock()

    @property
    def services(self) -> Mapping[str, Provider[Any]]:
        """Read-only live view of the registered providers."""
        return MappingProxyType(self._services)

    def register(self, name: str, provider: Provider[Any]) -> None:
        """Register `provider` under `name`, replacing any existing binding.

        Example:
          container.register("db", unique_instance(container, "db", make_db, {"dsn": dsn}))

        """
        with self._lock:
            replaced = name in self._services
            self._services[name] = provider

        if replaced:
            logger.debug("Replaced provider for service %r", name)
        else:
            logger.debug("Registered provider for service %r", name)

    def resolve(self, name: str) -> object:
        """Resolve the name to an instance by calling its provider.

        Whatever the provider raises reaches the caller unchanged.
        """
        provider = self.get_provider(name)
        return provider()

    def get_provider(self, name: str) -> Provider[Any]:
        """Return the provider registered under `name` without calling it."""
        with self._lock:
            provider = self._services.get(name)

        if provider is None:
            self._not_found(name)

        return provider

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._services

    def assert_has(self, name: str) -> None:
        """Raise `DependencyNotFound` unless a provider exists for `name`."""
        if not self.has(name):
            self._not_found(name)

    def _not_found(self, name: str) -> NoReturn:
        logger.debug("No provider registered for service %r", name, extra={"service_name": name})
        raise DependencyNotFound(name)
