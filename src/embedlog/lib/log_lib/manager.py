"""
Logger — the level gate in front of the format interpreter.

A message is shown when SILENT < level <= threshold. A passing call
runs, in order:

    prefix hook  →  "W: " (when show_level)  →  body  →  suffix hook

The Logger never looks up global state, so any number can coexist. A
module-level default instance (init_log / get_log) exists for
application code that wants one well-known destination.

Setting EMBEDLOG_DISABLE in the environment before import turns every
emit and configuration call into an empty stub.
"""

import os
from typing import Any, Callable, Optional

from .errors import SinkNotConfiguredError
from .formatter import DEFAULT_WORD_BITS, check_args, render
from .levels import (
    SILENT, FATAL, ERROR, WARNING, DEBUG, TRACE, VERBOSE,
    clamp_level, level_char,
)
from .sinks import Sink, as_sink, open_serial_sink
from .sources import as_source

Hook = Callable[[Sink], None]

DISABLE_LOGGING = os.environ.get('EMBEDLOG_DISABLE', '') not in ('', '0')

DEFAULT_SERIAL_PORT = '/dev/ttyUSB0'

LEVEL_SEPARATOR = b': '


class Logger:
    """Level-gated printf-style logger writing to a byte sink.

    Usage::

        log = Logger()
        log.configure(WARNING, sys.stdout)
        log.warning("Log as Warning with integer values : %d, %d\\n", 34, 799870)
        log.debug("dropped, DEBUG > WARNING")

    Args:
        threshold: Highest level that is emitted (SILENT..VERBOSE)
        sink: Output target; anything as_sink() accepts
        show_level: Print the level character and ': ' before each line
        strict: Validate arguments against the format before writing
        checks: Raise when emitting without a sink (off under python -O)
        disabled: Turn the whole logger into no-ops; defaults to the
            EMBEDLOG_DISABLE environment switch
        word_bits: Bit width for negative hex/binary conversions
    """

    def __init__(
        self,
        threshold: int = SILENT,
        sink: Any = None,
        show_level: bool = True,
        *,
        strict: bool = False,
        checks: bool = __debug__,
        disabled: Optional[bool] = None,
        word_bits: int = DEFAULT_WORD_BITS,
    ):
        self.disabled = DISABLE_LOGGING if disabled is None else disabled
        self.threshold = clamp_level(threshold)
        self.sink: Optional[Sink] = as_sink(sink)
        self.show_level = show_level
        self.strict = strict
        self.checks = checks
        self.word_bits = word_bits
        self.prefix: Optional[Hook] = None
        self.suffix: Optional[Hook] = None

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def configure(self, threshold: int, sink: Any,
                  show_level: bool = True) -> None:
        """Set threshold, sink and show_level. Call before emitting."""
        if self.disabled:
            return
        self.threshold = clamp_level(threshold)
        self.sink = as_sink(sink)
        self.show_level = show_level

    def begin(self, threshold: int, baud: int,
              port: str = DEFAULT_SERIAL_PORT,
              show_level: bool = True) -> Optional[Sink]:
        """Open a serial port at ``baud`` and log to it.

        Needs pyserial. The returned sink belongs to the caller.
        """
        if self.disabled:
            return None
        sink = open_serial_sink(port, baud)
        self.configure(threshold, sink, show_level)
        return sink

    def set_prefix(self, hook: Optional[Hook]) -> None:
        """Replace the hook called before each line (None clears it)."""
        if self.disabled:
            return
        self.prefix = hook

    def set_suffix(self, hook: Optional[Hook]) -> None:
        """Replace the hook called after each line (None clears it)."""
        if self.disabled:
            return
        self.suffix = hook

    # -------------------------------------------------------------------------
    # Emitting
    # -------------------------------------------------------------------------

    def is_enabled(self, level: int) -> bool:
        """True if a message at ``level`` would be emitted."""
        if self.disabled:
            return False
        return SILENT < level <= self.threshold

    def emit_at(self, level: int, fmt: Any, *args: Any) -> None:
        """Emit ``fmt`` rendered with ``args`` if ``level`` passes the gate.

        Raises:
            SinkNotConfiguredError: No sink and checks are on.
            FormatArgumentError: Strict mode and the arguments do not fit.
        """
        if not self.is_enabled(level):
            return
        sink = self.sink
        if sink is None:
            if self.checks:
                raise SinkNotConfiguredError(
                    "logger has no sink; call configure() first")
            return

        source = as_source(fmt)
        if self.strict:
            check_args(source, args)

        if self.prefix is not None:
            self.prefix(sink)
        if self.show_level:
            sink.write_byte(ord(level_char(level)))
            sink.write_bytes(LEVEL_SEPARATOR)
        render(source, args, sink, word_bits=self.word_bits)
        if self.suffix is not None:
            self.suffix(sink)

    def fatal(self, fmt: Any, *args: Any) -> None:
        """Emit at FATAL ("F: ...")."""
        self.emit_at(FATAL, fmt, *args)

    def error(self, fmt: Any, *args: Any) -> None:
        """Emit at ERROR ("E: ...")."""
        self.emit_at(ERROR, fmt, *args)

    def warning(self, fmt: Any, *args: Any) -> None:
        """Emit at WARNING ("W: ...")."""
        self.emit_at(WARNING, fmt, *args)

    def debug(self, fmt: Any, *args: Any) -> None:
        """Emit at DEBUG ("D: ...")."""
        self.emit_at(DEBUG, fmt, *args)

    def trace(self, fmt: Any, *args: Any) -> None:
        """Emit at TRACE ("T: ...")."""
        self.emit_at(TRACE, fmt, *args)

    def verbose(self, fmt: Any, *args: Any) -> None:
        """Emit at VERBOSE ("V: ...")."""
        self.emit_at(VERBOSE, fmt, *args)


# =============================================================================
# Module-level default instance
# =============================================================================

_logger: Optional[Logger] = None


def init_log(threshold: int = SILENT, sink: Any = None,
             show_level: bool = True, **kwargs: Any) -> Logger:
    """Initialize the module-level Logger.

    Call once at program startup. Keyword arguments go to Logger().

    Returns:
        The initialized Logger instance
    """
    global _logger
    _logger = Logger(threshold, sink, show_level, **kwargs)
    return _logger


def get_log() -> Logger:
    """Get the module-level Logger, creating a silent default if needed."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger
