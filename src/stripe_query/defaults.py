"""Default options applied before caller options on every build.

The intended lifecycle is init-once, read-many: configure defaults at
startup, then only read them. There is no locking; concurrent writers must
synchronize externally. The option list is swapped as a whole tuple, so a
reader never sees a partially replaced list.
"""

from __future__ import annotations

from stripe_query._logging import logger
from stripe_query.enums import Connective
from stripe_query.options import Option

DEFAULT_CONNECTIVE = Connective.AND


class DefaultOptions:
    """Provider of the options applied ahead of caller options.

    Usage:
        defaults = DefaultOptions(with_deleted(False))
        query = build_query(with_active(True), defaults=defaults)
    """

    def __init__(self, *options: Option) -> None:
        self._options: tuple[Option, ...] = options

    def get(self) -> tuple[Option, ...]:
        return self._options

    def set(self, *options: Option) -> None:
        """Replace the whole default list."""
        self._options = options
        logger.debug("Default options replaced (%d options)", len(options))

    def reset(self) -> None:
        self._options = ()
        logger.debug("Default options reset")

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"DefaultOptions({len(self._options)} options)"


default_options = DefaultOptions()


def get_default_options() -> tuple[Option, ...]:
    """Return the process-wide default options."""
    return default_options.get()


def set_default_options(*options: Option) -> None:
    """Replace the process-wide default options."""
    default_options.set(*options)


def reset_default_options() -> None:
    """Clear the process-wide default options."""
    default_options.reset()
