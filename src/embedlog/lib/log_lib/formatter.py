"""
Format interpreter — printf-style rendering straight into a sink.

Single pass, two states. In LITERAL every byte is copied to the sink
until the introducer ``%`` shows up; SPECIFIER consumes exactly one more
byte, runs the matching conversion and drops back to LITERAL.

Specifiers::

    %s  string                 %x  hex                %t  't' / 'f'
    %c  character              %X  hex with 0x        %T  'true' / 'false'
    %d  integer                %b  binary             %D  float
    %l  long integer           %B  binary with 0b     %F  float

Any other byte after ``%`` is written as-is and consumes no argument,
so ``%%`` prints a percent sign. There is no width, precision or
padding.

By default the renderer is best-effort: a missing argument renders as
nothing, a value the conversion cannot handle is written as ``str()``,
extra arguments are ignored. ``strict=True`` validates the whole
argument list against the specifiers first and raises
FormatArgumentError before anything is written.
"""

import math
import operator
from typing import Any, Callable, Dict, List, Sequence, Tuple

from .errors import FormatArgumentError
from .sinks import Sink
from .sources import ByteSource, as_source

INTRODUCER = ord('%')

# Scanner states
LITERAL = 0
SPECIFIER = 1

# Width of the two's-complement pattern used for negative hex/binary
DEFAULT_WORD_BITS = 32

FLOAT_DIGITS = 2
FLOAT_OVERFLOW = 4294967040.0


# =============================================================================
# Conversions
# =============================================================================

def _to_unsigned(value: int, word_bits: int) -> int:
    value = operator.index(value)
    if value < 0:
        value &= (1 << word_bits) - 1
    return value


def _conv_string(arg, word_bits):
    if isinstance(arg, ByteSource):
        return arg.to_bytes()
    if isinstance(arg, (bytes, bytearray, memoryview)):
        data = bytes(arg)
    else:
        data = str(arg).encode('utf-8')
    end = data.find(b'\0')
    return data if end < 0 else data[:end]


def _conv_char(arg, word_bits):
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("expected a single character")
        return arg.encode('utf-8')
    return bytes((operator.index(arg) & 0xFF,))


def _conv_decimal(arg, word_bits):
    return str(operator.index(arg)).encode('ascii')


def _conv_hex(arg, word_bits):
    return format(_to_unsigned(arg, word_bits), 'x').encode('ascii')


def _conv_hex_prefixed(arg, word_bits):
    return b'0x' + _conv_hex(arg, word_bits)


def _conv_binary(arg, word_bits):
    return format(_to_unsigned(arg, word_bits), 'b').encode('ascii')


def _conv_binary_prefixed(arg, word_bits):
    return b'0b' + _conv_binary(arg, word_bits)


def _conv_bool_short(arg, word_bits):
    return b't' if arg else b'f'


def _conv_bool_long(arg, word_bits):
    return b'true' if arg else b'false'


def format_float(number: float, digits: int = FLOAT_DIGITS) -> str:
    """Render a float the way the Arduino Print class does.

    Fixed ``digits`` fractional digits, rounded half-up on the magnitude.
    Out-of-range values come out as ``nan``, ``inf`` or ``ovf``.
    """
    number = float(number)
    if math.isnan(number):
        return 'nan'
    if math.isinf(number):
        return 'inf'
    if number > FLOAT_OVERFLOW or number < -FLOAT_OVERFLOW:
        return 'ovf'

    parts = []
    if number < 0.0:
        parts.append('-')
        number = -number

    scale = 10 ** digits
    int_part, frac = divmod(int(number * scale + 0.5), scale)
    parts.append(str(int_part))
    if digits > 0:
        parts.append('.')
        parts.append(str(frac).zfill(digits))
    return ''.join(parts)


def _conv_float(arg, word_bits):
    return format_float(arg).encode('ascii')


Conversion = Callable[[Any, int], bytes]

CONVERSIONS: Dict[str, Conversion] = {
    's': _conv_string,
    'c': _conv_char,
    'd': _conv_decimal,
    'l': _conv_decimal,
    'x': _conv_hex,
    'X': _conv_hex_prefixed,
    'b': _conv_binary,
    'B': _conv_binary_prefixed,
    't': _conv_bool_short,
    'T': _conv_bool_long,
    'D': _conv_float,
    'F': _conv_float,
}


# =============================================================================
# Strict-mode type checks
# =============================================================================

def _is_int(arg) -> bool:
    return isinstance(arg, int) and not isinstance(arg, bool)


def _is_char(arg) -> bool:
    if isinstance(arg, str):
        return len(arg) == 1
    return _is_int(arg) and 0 <= arg <= 0xFF


def _is_string(arg) -> bool:
    return isinstance(arg, (str, bytes, bytearray, memoryview, ByteSource))


def _is_float(arg) -> bool:
    return isinstance(arg, float) or _is_int(arg)


_ACCEPTS: Dict[str, Tuple[Callable[[Any], bool], str]] = {
    's': (_is_string, 'a string'),
    'c': (_is_char, 'a single character'),
    'd': (_is_int, 'an integer'),
    'l': (_is_int, 'an integer'),
    'x': (_is_int, 'an integer'),
    'X': (_is_int, 'an integer'),
    'b': (_is_int, 'an integer'),
    'B': (_is_int, 'an integer'),
    't': (lambda arg: isinstance(arg, bool), 'a bool'),
    'T': (lambda arg: isinstance(arg, bool), 'a bool'),
    'D': (_is_float, 'a number'),
    'F': (_is_float, 'a number'),
}


# =============================================================================
# Scanning
# =============================================================================

def _scan(source) -> Tuple[List[str], bool]:
    """Return the converting specifiers in order and whether a '%' dangles."""
    specs = []
    state = LITERAL
    for byte in as_source(source):
        if state == LITERAL:
            if byte == INTRODUCER:
                state = SPECIFIER
            continue
        state = LITERAL
        spec = chr(byte)
        if spec in CONVERSIONS:
            specs.append(spec)
    return specs, state == SPECIFIER


def iter_specifiers(source):
    """Yield each argument-consuming specifier character of ``source``."""
    specs, _ = _scan(source)
    yield from specs


def count_specifiers(source) -> int:
    """Number of arguments ``source`` expects."""
    specs, _ = _scan(source)
    return len(specs)


def check_args(source, args: Sequence[Any]) -> None:
    """Validate ``args`` against the specifiers of ``source``.

    Raises:
        FormatArgumentError: On a dangling introducer, an arity mismatch
            or an argument of the wrong type.
    """
    specs, dangling = _scan(source)
    if dangling:
        raise FormatArgumentError("format ends with a dangling '%'")
    if len(args) != len(specs):
        raise FormatArgumentError(
            f"format expects {len(specs)} argument(s), got {len(args)}")
    for index, (spec, arg) in enumerate(zip(specs, args)):
        accepts, expected = _ACCEPTS[spec]
        if not accepts(arg):
            raise FormatArgumentError(
                f"argument {index} for %{spec} must be {expected}, "
                f"got {type(arg).__name__}",
                specifier=spec, index=index)


_TRUE_WORDS = {'1', 't', 'true', 'y', 'yes', 'on'}
_FALSE_WORDS = {'0', 'f', 'false', 'n', 'no', 'off'}


def _coerce_one(spec: str, raw: str, index: int):
    try:
        if spec in 'dlxXbB':
            return int(raw, 0)
        if spec in 'DF':
            return float(raw)
    except ValueError:
        raise FormatArgumentError(
            f"argument {index} for %{spec}: {raw!r} is not a number",
            specifier=spec, index=index) from None
    if spec in 'tT':
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise FormatArgumentError(
            f"argument {index} for %{spec}: {raw!r} is not a boolean",
            specifier=spec, index=index)
    if spec == 'c' and len(raw) != 1:
        raise FormatArgumentError(
            f"argument {index} for %c: {raw!r} is not a single character",
            specifier=spec, index=index)
    return raw


def coerce_args(source, raw_args: Sequence[str]) -> list:
    """Convert text arguments (e.g. from a shell) into typed values.

    Each raw string is parsed according to the specifier it lines up
    with. Integers accept 0x/0b/0o prefixes. Surplus strings are passed
    through unchanged.

    Raises:
        FormatArgumentError: If a string cannot be parsed for its specifier.
    """
    specs = list(iter_specifiers(source))
    values = []
    for index, raw in enumerate(raw_args):
        if index < len(specs):
            values.append(_coerce_one(specs[index], raw, index))
        else:
            values.append(raw)
    return values


# =============================================================================
# Rendering
# =============================================================================

def _convert(conversion: Conversion, arg, word_bits: int) -> bytes:
    try:
        return conversion(arg, word_bits)
    except (TypeError, ValueError, OverflowError):
        return str(arg).encode('utf-8')


def render(source, args: Sequence[Any], sink: Sink, *,
           strict: bool = False,
           word_bits: int = DEFAULT_WORD_BITS) -> int:
    """Render ``source`` with ``args`` into ``sink``.

    Args:
        source: Format string (str, bytes or a ByteSource of either
            storage class)
        args: Positional values, one per converting specifier
        sink: Destination for the output bytes
        strict: Validate args first and raise instead of guessing
        word_bits: Bit width used for negative hex/binary values

    Returns:
        Number of bytes written to the sink.
    """
    src = as_source(source)
    if strict:
        check_args(src, args)

    pending = iter(args)
    written = 0
    state = LITERAL
    for byte in src:
        if state == LITERAL:
            if byte == INTRODUCER:
                state = SPECIFIER
            else:
                sink.write_byte(byte)
                written += 1
            continue

        state = LITERAL
        conversion = CONVERSIONS.get(chr(byte))
        if conversion is None:
            sink.write_byte(byte)
            written += 1
            continue
        try:
            arg = next(pending)
        except StopIteration:
            continue
        data = _convert(conversion, arg, word_bits)
        sink.write_bytes(data)
        written += len(data)

    return written
