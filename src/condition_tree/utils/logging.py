from __future__ import annotations

"""Logging helpers shared by condition tree operations."""

import logging
from functools import wraps
from typing import Any, Callable

_MAX_SUMMARY = 120


def summarize(value: Any) -> str:
    """Short single-line rendering of a call argument or result.

    Conditions render through ``describe()`` tagged with their id, so log
    lines stay readable for large trees and still name the exact node.
    """
    describe = getattr(value, "describe", None)
    if callable(describe) and hasattr(value, "id"):
        text = f"<{value.__class__.__name__} {value.id[:8]}: {describe()}>"
    elif isinstance(value, (list, tuple)):
        text = "[" + ", ".join(summarize(v) for v in value) + "]"
    else:
        text = repr(value)
    if len(text) > _MAX_SUMMARY:
        text = text[: _MAX_SUMMARY - 3] + "..."
    return text


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging calls and results at DEBUG; errors are logged and re-raised."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        logger = logging.getLogger(logger_name or func.__module__)
        name = func.__qualname__

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            debug = logger.isEnabledFor(logging.DEBUG)
            if debug:
                rendered = [summarize(a) for a in args]
                rendered += [f"{k}={summarize(v)}" for k, v in kwargs.items()]
                logger.debug("Calling %s(%s)", name, ", ".join(rendered))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("%s failed", name)
                raise
            if debug:
                logger.debug("%s returned %s", name, summarize(result))
            return result

        return _wrapper

    return _decorator
