"""Error handling decorators for standardized exception handling."""

import logging
from functools import wraps
from typing import Any, Callable, Optional

from ...domain.exceptions import BridgeError, TransportError


def handle_gateway_errors(
    operation_name: str,
    logger: Optional[logging.Logger] = None,
    reraise: bool = True,
    default_return: Any = None,
):
    """Decorator for standardized gateway error handling.

    Bridge errors pass through untouched. Any other exception raised by the
    wrapped gateway call is logged and converted to TransportError, with the
    original exception chained as its cause.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)
        reraise: Whether to raise TransportError after logging
        default_return: Value to return on error if not re-raising

    Example:
        @handle_gateway_errors("Read variable")
        def read(gateway, handle, buffer):
            gateway.read(handle, buffer)
    """

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return func(*args, **kwargs)
            except BridgeError:
                raise
            except Exception as err:
                log.error(
                    "%s failed: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                if reraise:
                    raise TransportError(f"{operation_name} failed: {err}") from err
                return default_return

        return wrapper

    return decorator
