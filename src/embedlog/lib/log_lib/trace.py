"""
Function tracing decorator.

Routes trace output through the default Logger at TRACE severity, so
traces show only when the logger's threshold reaches TRACE.
"""

import functools
import inspect
from pathlib import Path

from .levels import TRACE


def _short_repr(value) -> str:
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the default Logger.

    Writes one line on entry with the arguments, one on return with the
    value (when not None), and one when an exception escapes.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_log

        log = get_log()
        if not log.is_enabled(TRACE):
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__qualname__

        args_repr = [_short_repr(arg) for arg in args]
        args_repr.extend(f"{key}={_short_repr(value)}"
                         for key, value in kwargs.items())
        args_str = ', '.join(args_repr)

        log.trace(">> %s.%s(%s)\n", module_name, func_name, args_str)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.trace("!! %s.%s raised: %s: %s\n",
                      module_name, func_name, type(e).__name__, str(e))
            raise

        if result is not None:
            log.trace("<< %s.%s returned: %s\n",
                      module_name, func_name, _short_repr(result))
        return result

    return wrapper
