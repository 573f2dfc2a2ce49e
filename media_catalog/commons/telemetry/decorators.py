"""Logging decorators and the log context manager."""

import functools
import inspect
import logging
import time
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

from media_catalog.commons.telemetry.logger import (
    correlation_id_var,
    get_correlation_id,
    get_log_context,
    get_logger,
    log_context_var,
    set_correlation_id,
)

P = ParamSpec("P")
R = TypeVar("R")


def _log_exception(
    log: logging.Logger, level: int, message: str, error: Exception
) -> None:
    log.log(
        level,
        message,
        exc_info=True,
        extra={"exception_type": type(error).__name__},
    )


@overload
def log_exceptions(
    func: Callable[P, R],
) -> Callable[P, R]: ...


@overload
def log_exceptions(
    *,
    logger: logging.Logger | None = None,
    level: int = logging.ERROR,
    message: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def log_exceptions(
    func: Callable[P, R] | None = None,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.ERROR,
    message: str | None = None,
) -> Callable[P, R] | Callable[[Callable[P, R]], Callable[P, R]]:
    """Log exceptions raised by the decorated function, then re-raise them.

    Works on plain and async functions, with or without arguments:
        @log_exceptions
        async def commit(): ...

        @log_exceptions(level=logging.WARNING)
        def parse(): ...

    Args:
        func: The function to decorate (when used without parentheses).
        logger: Optional logger. Defaults to the function's module logger.
        level: Log level for the exception record.
        message: Optional message. Defaults to "Exception in <qualname>".
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        log = logger or get_logger(fn.__module__)
        msg = message or f"Exception in {fn.__qualname__}"

        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
                try:
                    return await fn(*args, **kwargs)
                except Exception as e:
                    _log_exception(log, level, msg, e)
                    raise

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return fn(*args, **kwargs)
            except Exception as e:
                _log_exception(log, level, msg, e)
                raise

        return sync_wrapper

    if func is not None:
        return decorator(func)
    return decorator


@overload
def timed(
    func: Callable[P, R],
) -> Callable[P, R]: ...


@overload
def timed(
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    threshold_ms: float | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def timed(
    func: Callable[P, R] | None = None,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    threshold_ms: float | None = None,
) -> Callable[P, R] | Callable[[Callable[P, R]], Callable[P, R]]:
    """Log how long the decorated function took.

    Args:
        func: The function to decorate (when used without parentheses).
        logger: Optional logger. Defaults to the function's module logger.
        level: Log level for timing records.
        threshold_ms: Only log calls at least this slow, in milliseconds.
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        log = logger or get_logger(fn.__module__)

        def report(start: float) -> None:
            elapsed_ms = (time.perf_counter() - start) * 1000
            if threshold_ms is None or elapsed_ms >= threshold_ms:
                log.log(
                    level,
                    f"{fn.__qualname__} completed",
                    extra={"duration_ms": round(elapsed_ms, 2)},
                )

        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
                start = time.perf_counter()
                try:
                    return await fn(*args, **kwargs)
                finally:
                    report(start)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                report(start)

        return sync_wrapper

    if func is not None:
        return decorator(func)
    return decorator


class LogContext:
    """Adds key-value pairs to the logging context for the ``with`` block.

    The previous context is restored on exit, so nested blocks compose:
        with LogContext(video_id=video.id):
            logger.info("Uploading")  # context={"video_id": ...}

    The outermost block also opens a correlation ID when none is set, so
    every record of one use-case call shares it.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.context = kwargs
        self._previous_context: dict[str, Any] = {}
        self._opened_correlation = False

    def __enter__(self) -> "LogContext":
        self._previous_context = get_log_context()
        log_context_var.set({**self._previous_context, **self.context})
        if get_correlation_id() is None:
            set_correlation_id()
            self._opened_correlation = True
        return self

    def __exit__(self, *args: Any) -> None:
        log_context_var.set(self._previous_context)
        if self._opened_correlation:
            correlation_id_var.set(None)
            self._opened_correlation = False
