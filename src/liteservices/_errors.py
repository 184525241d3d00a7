from __future__ import annotations

from typing import Any


class DependencyNotFound(KeyError):  # noqa: N818
    """Raised when a service name has no provider in the container.

    The missing name is kept in `service_name` (and in `extra`) for logging;
    it is deliberately left out of the message shown by `str()`.
    """

    package_name = "liteservices"
    error_name = "dependency-not-found"
    detail = "requested service not found in the DI container"
    status = 500

    def __init__(self, service_name: str) -> None:
        super().__init__(service_name)
        self.service_name = service_name
        self.extra: dict[str, Any] = {"logs_only": {"service_name": service_name}}

    def __str__(self) -> str:
        return self.detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.service_name!r})"

    def __reduce__(self) -> tuple[type[DependencyNotFound], tuple[str]]:
        return (type(self), (self.service_name,))
