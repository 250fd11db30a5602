#!/usr/bin/env python3
"""
decorators.py
--------------------
Decorators shared by the memo, tag and settings managers.

``log_database_operation`` records what a manager call touched, in
Reflog terms: memos and memo ids as their short (8 hex digit) form,
metadata dicts as their keys, memo lists and tag lists as their sizes,
and sync statistics as-is. ``handle_db_errors`` turns SQLAlchemy
failures into DatabaseError.
"""
import inspect
import time
import uuid
from functools import wraps
from typing import Any, Callable, Dict

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from reflog.core.exceptions import DatabaseError
from reflog.core.logging_manager import safe_logger
from reflog.dataclasses.memo import Memo

SHORT_ID = 8
MAX_TEXT = 40


def describe_value(value: Any) -> Any:
    """
    Log-friendly summary of a manager argument or result.

    Examples:
        >>> describe_value(["work", "life"])
        '2 items'
        >>> describe_value({"title": "Run", "tags": ["x"]})
        ['tags', 'title']
    """
    if isinstance(value, Memo):
        return f"memo:{str(value.id)[:SHORT_ID]}"
    if isinstance(value, uuid.UUID):
        return f"memo:{str(value)[:SHORT_ID]}"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return value if len(value) <= MAX_TEXT else value[:MAX_TEXT] + "…"
    if isinstance(value, (bytes, bytearray)):
        return f"{len(value)} bytes"
    if isinstance(value, dict):
        # Sync statistics are worth keeping whole
        if all(isinstance(v, int) for v in value.values()):
            return dict(value)
        return sorted(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"{len(value)} items"
    # Generators and other one-shot iterables must not be consumed here
    return type(value).__name__


def describe_call(
    signature: inspect.Signature, args: tuple, kwargs: Dict[str, Any]
) -> Dict[str, Any]:
    """Named, summarized arguments of a manager method call (``self`` excluded)."""
    try:
        bound = signature.bind(None, *args, **kwargs)
    except TypeError:
        return {}
    names = list(bound.arguments)[1:]
    return {name: describe_value(bound.arguments[name]) for name in names}


def log_database_operation(operation_name: str):
    """
    Log a manager method: its arguments on entry, its result and duration
    on success, the error and arguments on failure.

    The manager's ``logger`` attribute may be None.
    """

    def decorator(function: Callable) -> Callable:
        signature = inspect.signature(function)

        @wraps(function)
        def wrapper(self, *args, **kwargs):
            logger = safe_logger(getattr(self, "logger", None))
            details = describe_call(signature, args, kwargs)
            started = time.perf_counter()

            logger.log_debug(f"Starting {operation_name}", details)
            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                logger.log_error(
                    e,
                    {
                        "operation": operation_name,
                        **details,
                        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                    },
                )
                raise

            logger.log_operation(
                operation_name,
                {
                    **details,
                    "result": describe_value(result),
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
            return result

        return wrapper

    return decorator


def handle_db_errors(function: Callable) -> Callable:
    """Re-raise SQLAlchemy errors from ``function`` as DatabaseError."""

    @wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except IntegrityError as e:
            raise DatabaseError(f"Data integrity violation: {e}")
        except SQLAlchemyError as e:
            raise DatabaseError(f"Database operation failed: {e}")

    return wrapper
