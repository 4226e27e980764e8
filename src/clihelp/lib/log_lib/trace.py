"""
Function tracing decorator.

Reports calls through the OutputManager singleton at level 3 on the
'trace' channel.
"""

import functools
import inspect


def _short_repr(value) -> str:
    if isinstance(value, str) and len(value) > 50:
        return repr(value[:47] + '...')
    if isinstance(value, (list, tuple, dict)) and len(value) > 3:
        return f"<{type(value).__name__} of {len(value)} items>"
    return repr(value)


def trace(func):
    """Decorator that traces entry, return value and exceptions of ``func``.

    Silent unless the 'trace' channel threshold is at least 3
    (``-vvv`` or ``--show trace:3``).
    """
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    takes_self = next(iter(inspect.signature(func).parameters), None) == 'self'

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Deferred to avoid a circular import at package load
        from .manager import get_output

        out = get_output()
        if out.threshold('trace') < 3:
            return func(*args, **kwargs)

        shown = args[1:] if takes_self else args
        args_str = ', '.join(
            [_short_repr(a) for a in shown]
            + [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
        )
        out.emit(3, "[TRACE] >> {mod}.{fn}({args})",
                 channel='trace', mod=module_name, fn=func.__name__, args=args_str)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {mod}.{fn} raised: {exc}: {msg}",
                     channel='trace', mod=module_name, fn=func.__name__,
                     exc=type(e).__name__, msg=str(e))
            raise
        if result is not None:
            out.emit(3, "[TRACE] << {mod}.{fn} returned: {val}",
                     channel='trace', mod=module_name, fn=func.__name__,
                     val=_short_repr(result))
        return result

    return wrapper
