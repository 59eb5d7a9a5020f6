"""Debug logging for query construction."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "stripe_query"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def _describe(arg: Any) -> str:
    # Options are closures; their qualified name is the readable part.
    if callable(arg) and hasattr(arg, "__qualname__"):
        return arg.__qualname__.replace(".<locals>.", ":")
    return repr(arg)


def log_build_call(fn: F) -> F:
    """Decorator that logs builder calls and their rendered result at DEBUG."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not logger.isEnabledFor(logging.DEBUG):
            return fn(*args, **kwargs)

        arg_parts = [_describe(a) for a in args]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.debug("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.debug(
                "FAIL: %s -> %s: %s (%.6fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.debug("OK: %s -> %r (%.6fs)", fn.__qualname__, str(result), elapsed)
        return result

    return wrapper  # type: ignore[return-value]
