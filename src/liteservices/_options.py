from __future__ import annotations

import copy
from typing import TYPE_CHECKING, TypeVar


if TYPE_CHECKING:
    from collections.abc import Callable

    OptT = TypeVar("OptT")

    # Takes the stored options, returns the value handed to the factory
    OptionsPreparer = Callable[[OptT], OptT]


def clone_options(options: OptT) -> OptT:
    """Return a deep copy of `options`.

    Every call gets an independent structure, so a factory that embeds its
    options in the service cannot leak state between instances. Types that
    need custom copy behaviour can implement `__deepcopy__`.
    """
    return copy.deepcopy(options)


def share_options(options: OptT) -> OptT:
    """Return `options` unchanged (no copy of any kind)."""
    return options


DEFAULT_OPTIONS_PREPARER = clone_options
