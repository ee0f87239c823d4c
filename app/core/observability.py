from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from app.core.results import Failure

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _format_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    parts = [repr(a) for a in args]
    parts.extend(f"{k}={v!r}" for k, v in kwargs.items())
    return ", ".join(parts)


def log_operation(name: str | None = None) -> Callable[[F], F]:
    """Log start, completion and failures around an async method.

    The wrapped method's return value and exceptions pass through untouched.
    """

    def decorator(func: F) -> F:
        operation = name or func.__name__

        @functools.wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            logger.info("Operation %s started with arguments: [%s]", operation, _format_args(args, kwargs))
            try:
                result = await func(self, *args, **kwargs)
            except Exception as e:
                logger.error("Operation %s threw an exception: %s", operation, e)
                raise

            if isinstance(result, Failure):
                logger.warning("Operation %s failed: %s (%s)", operation, result.message, result.kind.value)
            else:
                logger.info("Operation %s completed successfully.", operation)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
