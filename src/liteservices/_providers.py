from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from ._options import DEFAULT_OPTIONS_PREPARER


logger = logging.getLogger(__name__)

T = TypeVar("T")
OptT = TypeVar("OptT")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ._container import Container, Provider
    from ._options import OptionsPreparer

    # Builds a service from (container, service name, options)
    ServiceFactory = Callable[[Container, str, OptT], T]
    # Runs against a freshly built service; may mutate it
    ServiceAction = Callable[[T], object]


def existing_instance(instance: T) -> Provider[T]:
    """Return a provider that always hands back `instance` itself."""

    def provide() -> T:
        return instance

    return provide


def alias_for(container: Container, target_name: str) -> Provider[object]:
    """Return a provider that resolves `target_name` from the container on every call.

    Nothing is cached: rebinding the target changes what the alias returns.
    """

    def provide() -> object:
        return container.resolve(target_name)

    return provide


def unique_instance(
    container: Container,
    service_name: str,
    factory: ServiceFactory[OptT, T],
    options: OptT | None = None,
    *,
    prepare_options: OptionsPreparer[OptT] = DEFAULT_OPTIONS_PREPARER,
    post_init_actions: Iterable[ServiceAction[T]] = (),
) -> Provider[T]:
    """Return a provider that builds a new service on every call.

    Example:
      container.register("conn", unique_instance(container, "conn", make_conn, {"retries": 3}))

    - `prepare_options` runs on `options` before each factory call; the default
      deep-copies them, pass `share_options` to hand over the same object.
    - `post_init_actions` run in order against each new service.
    """
    actions = tuple(post_init_actions)

    def provide() -> T:
        # Factories easily forget to copy their options and end up sharing them
        instance_options = prepare_options(options)
        service = factory(container, service_name, instance_options)
        _run_actions(service, actions)
        return service

    return provide


class SharedInstanceProvider(Generic[T]):
    """Provider that builds its service once, then registers it as an existing instance.

    The first call builds the service while holding this provider's own lock,
    then replaces itself in the container under `service_name`. Other lookups
    on the container are not held up while the factory runs. Later lookups through
    the container never reach this object again; direct calls to it return the
    cached service.

    If the factory or an action raises, nothing is cached or registered and the
    next call tries again.
    """

    def __init__(
        self,
        container: Container,
        service_name: str,
        factory: ServiceFactory[OptT, T],
        options: OptT | None,
        post_init_actions: Iterable[ServiceAction[T]],
    ) -> None:
        self._container = container
        self._service_name = service_name
        self._factory = factory
        self._options = options
        self._actions = tuple(post_init_actions)
        self._built = False
        self._service: T | None = None
        # Reentrant: the factory may resolve this same service again
        self._lock = threading.RLock()

    @property
    def built(self) -> bool:
        return self._built

    def __call__(self) -> T:
        with self._lock:
            if self._built:
                return cast("T", self._service)

            service = self._factory(self._container, self._service_name, self._options)
            _run_actions(service, self._actions)

            self._service = service
            self._built = True
            self._container.register(self._service_name, existing_instance(service))
            logger.debug("Built shared instance of service %r", self._service_name)

            return service

    def __repr__(self) -> str:
        state = "built" if self._built else "unbuilt"
        return f"{type(self).__name__}({self._service_name!r}, {state})"


def shared_instance(
    container: Container,
    service_name: str,
    factory: ServiceFactory[OptT, T],
    options: OptT | None = None,
    *,
    post_init_actions: Iterable[ServiceAction[T]] = (),
) -> SharedInstanceProvider[T]:
    """Return a provider that calls `factory` at most once.

    Register it under the same `service_name` you pass here: the first resolve
    swaps it for an `existing_instance` provider wrapping the built service.
    `options` are handed to the factory as-is.
    """
    return SharedInstanceProvider(container, service_name, factory, options, post_init_actions)


def _run_actions(service: T, actions: tuple[ServiceAction[T], ...]) -> None:
    for action in actions:
        action(service)
