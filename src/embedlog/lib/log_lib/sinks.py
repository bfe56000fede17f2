"""
Byte sinks — where formatted output goes.

A sink accepts single bytes and byte sequences. It is not owned by the
logger; whoever creates it closes it.

    BufferSink    collects bytes in memory (tests, displays)
    StreamSink    any binary writer: files, sockets, MicroPython UART,
                  pyserial Serial
    TextSink      text streams such as sys.stderr
"""

import codecs
import io
import sys
from typing import Any, Optional, TextIO, Union


class Sink:
    """Byte sink capability.

    Subclasses implement ``write_bytes``; ``write_byte`` and
    ``write_text`` are built on it.
    """

    def write_byte(self, byte: int) -> None:
        self.write_bytes(bytes((byte,)))

    def write_bytes(self, data: bytes) -> None:
        raise NotImplementedError

    def write_text(self, text: str) -> None:
        self.write_bytes(text.encode('utf-8'))


class BufferSink(Sink):
    """In-memory sink."""

    def __init__(self):
        self._buf = bytearray()

    def write_byte(self, byte: int) -> None:
        self._buf.append(byte)

    def write_bytes(self, data: bytes) -> None:
        self._buf.extend(data)

    def getvalue(self) -> bytes:
        return bytes(self._buf)

    @property
    def text(self) -> str:
        return self._buf.decode('utf-8', errors='replace')

    def clear(self) -> None:
        self._buf.clear()


class StreamSink(Sink):
    """Sink over an object with a ``write(bytes)`` method."""

    def __init__(self, stream: Any):
        self.stream = stream

    def write_bytes(self, data: bytes) -> None:
        self.stream.write(data)

    def flush(self) -> None:
        flush = getattr(self.stream, 'flush', None)
        if flush is not None:
            flush()


class TextSink(Sink):
    """Sink over a text stream (default: stderr).

    Bytes are decoded incrementally, so a multi-byte UTF-8 character
    written one byte at a time still comes out whole.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stderr
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')

    def write_bytes(self, data: bytes) -> None:
        text = self._decoder.decode(data)
        if text:
            self.stream.write(text)


def as_sink(target: Union[Sink, TextIO, Any, None]) -> Optional[Sink]:
    """Adapt an arbitrary output object into a Sink.

    Sinks pass through, text streams get a TextSink, anything else with
    a ``write`` method is treated as a binary writer. None stays None.
    """
    if target is None or isinstance(target, Sink):
        return target
    if isinstance(target, io.TextIOBase):
        return TextSink(target)
    if not hasattr(target, 'write'):
        raise TypeError(f"cannot use {type(target).__name__} as a log sink")
    return StreamSink(target)


def open_serial_sink(port: str, baud: int, **kwargs: Any) -> StreamSink:
    """Open a serial port with pyserial and wrap it in a StreamSink.

    ``port`` may be a device path or any pyserial URL (e.g. ``loop://``).
    Extra keyword arguments go to ``serial.serial_for_url``.
    """
    import serial

    kwargs.setdefault('write_timeout', 0.2)
    ser = serial.serial_for_url(port, baudrate=baud, **kwargs)
    return StreamSink(ser)
