"""
log_lib — leveled printf-style logging into byte sinks.

A small output library providing:
- Seven-step severity gate (SILENT..VERBOSE, level <= threshold)
- Single-pass format interpreter with %s %c %d %l %x %X %b %B %t %T %D %F
- Two format storage classes: RAM strings and program memory (F())
- Byte sink adapters for buffers, binary writers, text streams, serial
- Optional prefix/suffix hooks and a function tracing decorator

Public API:
    Logger           — level gate + hooks around the interpreter
    init_log         — singleton initialization
    get_log          — access singleton
    render           — format interpreter
    F                — store a format string in program memory
    RamSource, FlashSource, ProgramMemory — byte sources
    Sink, BufferSink, StreamSink, TextSink, as_sink — sinks
    trace            — function tracing decorator
"""

from .errors import (
    EmbedLogError, LevelError, SinkNotConfiguredError, FormatArgumentError,
)
from .levels import (
    SILENT, FATAL, ERROR, WARNING, DEBUG, TRACE, VERBOSE,
    LEVEL_CHARS, level_char, parse_level, format_level_list,
)
from .sources import (
    ByteSource, RamSource, FlashSource, ProgramMemory, PROGMEM, F, as_source,
)
from .sinks import (
    Sink, BufferSink, StreamSink, TextSink, as_sink, open_serial_sink,
)
from .formatter import (
    render, check_args, coerce_args, count_specifiers, format_float,
)
from .manager import Logger, init_log, get_log, DISABLE_LOGGING
from .hooks import uptime_prefix, newline_suffix, make_clock_prefix
from .trace import trace

__all__ = [
    'EmbedLogError', 'LevelError', 'SinkNotConfiguredError',
    'FormatArgumentError',
    'SILENT', 'FATAL', 'ERROR', 'WARNING', 'DEBUG', 'TRACE', 'VERBOSE',
    'LEVEL_CHARS', 'level_char', 'parse_level', 'format_level_list',
    'ByteSource', 'RamSource', 'FlashSource', 'ProgramMemory', 'PROGMEM',
    'F', 'as_source',
    'Sink', 'BufferSink', 'StreamSink', 'TextSink', 'as_sink',
    'open_serial_sink',
    'render', 'check_args', 'coerce_args', 'count_specifiers', 'format_float',
    'Logger', 'init_log', 'get_log', 'DISABLE_LOGGING',
    'uptime_prefix', 'newline_suffix', 'make_clock_prefix',
    'trace',
]
