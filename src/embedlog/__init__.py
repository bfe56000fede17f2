"""embedlog — leveled printf-style logging for small devices.

Severity-gated, allocation-light formatting straight into a byte sink
(serial port, display, socket, buffer), with format strings held in RAM
or in program memory.
"""

from embedlog._version import __version__, __app_name__
from embedlog.lib.log_lib import (
    SILENT, FATAL, ERROR, WARNING, DEBUG, TRACE, VERBOSE,
    Logger, init_log, get_log, F, render,
)

__all__ = [
    "__version__", "__app_name__",
    "SILENT", "FATAL", "ERROR", "WARNING", "DEBUG", "TRACE", "VERBOSE",
    "Logger", "init_log", "get_log", "F", "render",
]
