"""
Byte sources — the two storage classes a format string can live in.

The format interpreter only ever calls ``read_byte_at(offset)``; which
region the bytes come from is the source's business.

    RamSource     ordinary memory: str, bytes, bytearray
    FlashSource   an address inside a read-only ProgramMemory region

Both end at the first zero byte, or at the end of their backing data.

Usage::

    msg = F("boot ok after %d ms\\n")       # lives in program memory
    log.warning(msg, 812)
    log.warning("same text in RAM %d\\n", 812)
"""

from typing import Dict, Union

BytesLike = Union[bytes, bytearray, memoryview]

TERMINATOR = 0


def _encode(text) -> bytes:
    if isinstance(text, str):
        return text.encode('utf-8')
    return bytes(text)


class ByteSource:
    """Fetch capability shared by both storage classes."""

    storage = 'abstract'

    def read_byte_at(self, offset: int) -> int:
        """Return the byte at ``offset``, or 0 once past the end."""
        raise NotImplementedError

    def __iter__(self):
        offset = 0
        while True:
            byte = self.read_byte_at(offset)
            if byte == TERMINATOR:
                return
            yield byte
            offset += 1

    def to_bytes(self) -> bytes:
        """Copy the content (up to the terminator) out of the source."""
        return bytes(iter(self))

    def __repr__(self):
        return f"{type(self).__name__}({self.to_bytes()!r})"


class RamSource(ByteSource):
    """Format string held in ordinary memory."""

    storage = 'ram'

    def __init__(self, data: Union[str, BytesLike]):
        self._data = _encode(data)

    def read_byte_at(self, offset: int) -> int:
        if offset >= len(self._data):
            return TERMINATOR
        return self._data[offset]


class ProgramMemory:
    """A read-only region of zero-terminated strings at fixed addresses.

    Strings are appended with ``store()`` and never modified afterwards.
    Storing identical text twice returns the same address, the way a
    compiler folds duplicate literals into one flash constant.
    """

    def __init__(self, image: BytesLike = b''):
        self._image = bytearray(image)
        self._addresses: Dict[bytes, int] = {}

    def __len__(self):
        return len(self._image)

    def store(self, text: Union[str, BytesLike]) -> 'FlashSource':
        """Place ``text`` in the region and return a source pointing at it."""
        data = _encode(text)
        address = self._addresses.get(data)
        if address is None:
            address = len(self._image)
            self._image.extend(data)
            self._image.append(TERMINATOR)
            self._addresses[data] = address
        return FlashSource(self, address)

    def read_byte(self, address: int) -> int:
        """Read one byte; addresses outside the region read as the end marker."""
        if address < 0 or address >= len(self._image):
            return TERMINATOR
        return self._image[address]


class FlashSource(ByteSource):
    """Format string held in program memory, fetched through the region."""

    storage = 'flash'

    def __init__(self, memory: ProgramMemory, address: int):
        self.memory = memory
        self.address = address

    def read_byte_at(self, offset: int) -> int:
        return self.memory.read_byte(self.address + offset)


# Default region used by F()
PROGMEM = ProgramMemory()


def F(text: Union[str, BytesLike]) -> FlashSource:
    """Store ``text`` in the default program memory region."""
    return PROGMEM.store(text)


def as_source(fmt) -> ByteSource:
    """Wrap plain strings and bytes as RamSource; pass sources through."""
    if isinstance(fmt, ByteSource):
        return fmt
    return RamSource(fmt)
