from typing import Optional, Protocol

from varbyte.common import BYTE_SIZE, InvalidArgument, SinkError


# -----------------------------------------------------------------------------

def mask(n: int) -> int:
    """
    >>> bin(mask(0))
    '0b0'
    >>> bin(mask(1))
    '0b1'
    >>> bin(mask(2))
    '0b11'
    >>> bin(mask(3))
    '0b111'
    """
    return (1 << n) - 1


def low_bits(x: int, n: int) -> int:
    """
    >>> bin(low_bits(0b10101010, 0))
    '0b0'
    >>> bin(low_bits(0b10101010, 3))
    '0b10'
    >>> hex(low_bits(0x1AFF, 13))
    '0x1aff'
    """
    return x & mask(n)


# -----------------------------------------------------------------------------

class Sink(Protocol):
    def write(self, bs: bytes, /) -> Optional[int]:
        ...


def write1(sink: Sink, x: int) -> None:
    assert 0 <= x < 256
    try:
        n = sink.write(x.to_bytes(1, byteorder='little'))
    except OSError as e:
        raise SinkError(f"Cannot write byte to sink: {e}", e) from e

    # None is a non-blocking raw stream that would block.
    if n != 1:
        raise SinkError(f"Sink accepted {n} bytes instead of 1.")


# -----------------------------------------------------------------------------

class _Binary:
    def __init__(self):
        self._bit_offset: int = 0

    @property
    def is_aligned(self) -> bool:
        "Return True if the current offset is at the byte boundary."
        return self._bit_offset == 0

    @property
    def bit_offset(self) -> int:
        "Return the current bit offset"
        return self._bit_offset

    @property
    def bits_until_alignment(self) -> int:
        "Return the number of bits until the offset is at the byte boundary."
        return (BYTE_SIZE - self._bit_offset) % BYTE_SIZE

    def _add_to_bit_offset(self, n: int):
        self._bit_offset = (self._bit_offset + n) % BYTE_SIZE


class Packer(_Binary):
    """
    Pack values of arbitrary bit width into a byte sink.

    Bits are taken from the least significant end of each value and fill each
    output byte starting from its least significant bit. A write of 6 bits
    followed by a write of 3 bits therefore produces the same stream as a
    single 9 bit write of the concatenated bits.

    Every completed byte is written to the sink immediately, so only the
    current partial byte is held. The packer never flushes on its own: call
    `flush` to write the partial byte, otherwise its bits are lost.

    If the sink fails, the bytes written before the failure stay written, the
    partial byte is reset and the rest of the value is discarded. The stream
    should be abandoned at that point.
    """

    def __init__(self):
        super().__init__()
        self._current_byte = 0

    @property
    def pending(self) -> int:
        "Return the partial byte that has not been written yet."
        return self._current_byte

    def _emit(self, sink: Sink):
        b = self._current_byte
        self._current_byte = 0
        write1(sink, b)

    def _uint(self, sink: Sink, x: int, n: int, width: int):
        if not 0 <= n <= width:
            raise InvalidArgument(
                f"Cannot write {n} bits with a {width} bit entry point."
            )
        if not 0 <= x <= mask(width):
            raise InvalidArgument(
                f"Value {x} is not a {width} bit unsigned integer."
            )

        x = low_bits(x, n)

        while n > 0:
            # Fill the current byte with as many bits as it can take.
            m = min(n, self.bits_until_alignment or BYTE_SIZE)
            self._current_byte |= low_bits(x, m) << self._bit_offset
            self._add_to_bit_offset(m)
            x >>= m
            n -= m

            if self.is_aligned is True:
                self._emit(sink)

    def write8(self, sink: Sink, x: int, n: int):
        self._uint(sink, x, n, 8)

    def write16(self, sink: Sink, x: int, n: int):
        self._uint(sink, x, n, 16)

    def write32(self, sink: Sink, x: int, n: int):
        self._uint(sink, x, n, 32)

    def write64(self, sink: Sink, x: int, n: int):
        self._uint(sink, x, n, 64)

    def bool(self, sink: Sink, x: bool):
        if x is True:
            self.write8(sink, 1, 1)
        else:
            self.write8(sink, 0, 1)

    def flush(self, sink: Sink) -> int:
        """
        Write the partial byte, if any, padded with zero bits.

        Return the number of padding bits, 0 if nothing was pending. If the
        sink fails the partial byte is kept, so the flush can be retried.
        """
        if self.is_aligned is True:
            return 0

        padding = self.bits_until_alignment
        write1(sink, self._current_byte)
        self._bit_offset = 0
        self._current_byte = 0
        return padding

    def write(self, sink: Sink, x: int, n: int, width: int):
        "Write with the entry point of the given width."
        match width:
            case 8:
                self.write8(sink, x, n)
            case 16:
                self.write16(sink, x, n)
            case 32:
                self.write32(sink, x, n)
            case 64:
                self.write64(sink, x, n)
            case _:
                raise InvalidArgument(f"Unsupported width: {width}")
