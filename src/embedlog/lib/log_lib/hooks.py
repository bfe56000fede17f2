"""
Stock prefix/suffix hooks.

A hook is any callable taking the sink. Install with
``Logger.set_prefix`` / ``Logger.set_suffix``::

    log.set_prefix(uptime_prefix)      # "1532 W: ..."
    log.set_suffix(newline_suffix)     # terminate every line
"""

import time
from typing import Callable

from .sinks import Sink

CR = b"\n"

_BOOT = time.monotonic()


def millis() -> int:
    """Milliseconds since this module was imported."""
    return int((time.monotonic() - _BOOT) * 1000)


def uptime_prefix(sink: Sink) -> None:
    """Write the uptime in milliseconds followed by a space."""
    sink.write_text(f"{millis()} ")


def newline_suffix(sink: Sink) -> None:
    sink.write_bytes(CR)


def make_clock_prefix(clock: Callable[[], object],
                      separator: str = " ") -> Callable[[Sink], None]:
    """Build a prefix hook that writes ``clock()`` then ``separator``.

    Handy with an RTC read function or time.strftime.
    """
    def prefix(sink: Sink) -> None:
        sink.write_text(f"{clock()}{separator}")
    return prefix
