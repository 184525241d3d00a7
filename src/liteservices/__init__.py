"""Minimal service container.

This package provides a lightweight, synchronous dependency injection container
for Python: a registry mapping service names to providers (zero-argument
callables), plus helpers that build providers with common lifecycles.

Exports:
- `Container`: Registry of name -> provider bindings; register, resolve, check.
- `DependencyNotFound`: Raised when a requested service has no provider.
- `existing_instance`: Provider returning a pre-built object.
- `alias_for`: Provider resolving another service name on every call.
- `unique_instance`: Provider building a new service on every call.
- `shared_instance`: Provider building a service once, then caching it in the container.
- `clone_options` / `share_options`: Strategies for preparing factory options
  (deep copy, the default, or pass-through).
"""

from ._container import Container
from ._errors import DependencyNotFound
from ._options import DEFAULT_OPTIONS_PREPARER, clone_options, share_options
from ._providers import (
    SharedInstanceProvider,
    alias_for,
    existing_instance,
    shared_instance,
    unique_instance,
)


__all__ = [
    "DEFAULT_OPTIONS_PREPARER",
    "Container",
    "DependencyNotFound",
    "SharedInstanceProvider",
    "alias_for",
    "clone_options",
    "existing_instance",
    "share_options",
    "shared_instance",
    "unique_instance",
]
