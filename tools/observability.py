"""Structured logging around tool calls, with optional payload validation."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from stylist_app.logging_config import (
    ensure_correlation_id,
    get_logger,
    log_event,
    redact_for_log,
)

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")

_PREVIEW_KEYS = 6


def _preview(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """First few keyword arguments, scrubbed for logging."""

    names = list(kwargs)
    preview = {name: kwargs[name] for name in names[:_PREVIEW_KEYS]}
    if len(names) > _PREVIEW_KEYS:
        preview["truncated"] = True
    return redact_for_log(preview)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def _result_size(result: Any) -> int | None:
    if isinstance(result, (list, tuple)):
        return len(result)
    return None


def instrument_tool(
    tool_name: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log start, completion and failure of a tool call under one correlation id.

    With ``input_model`` the keyword arguments are validated and replaced by
    the model's dump before the call. A rejected payload is handed to
    ``on_validation_error`` when given, otherwise the ``ValidationError``
    propagates.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()

            def emit(level: int, event: str, **fields: Any) -> None:
                log_event(LOGGER, level, event, tool=tool_name, correlation_id=correlation_id, **fields)

            start = time.perf_counter()
            if input_model is not None:
                try:
                    kwargs = input_model.model_validate(kwargs).model_dump()
                except ValidationError as exc:
                    emit(
                        logging.WARNING,
                        "tool_validation_failed",
                        errors=exc.errors(include_url=False, include_input=False),
                    )
                    if on_validation_error is None:
                        raise
                    return on_validation_error(exc)

            emit(logging.INFO, "tool_call_started", kwargs=_preview(kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                emit(logging.ERROR, "tool_call_failed", duration_ms=_elapsed_ms(start), exc_info=True)
                raise
            emit(
                logging.INFO,
                "tool_call_completed",
                duration_ms=_elapsed_ms(start),
                result_size=_result_size(result),
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_tool"]
