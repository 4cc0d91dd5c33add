"""
MSB-first bit reader over a byte stream.

Bits are pulled from the stream one byte at a time and handed out most
significant bit first. At most one partially consumed byte is buffered.
"""

from typing import BinaryIO, NamedTuple

from .errors import UnexpectedEndOfInput


class BitCheckpoint(NamedTuple):
    buffer: int
    count: int


class BitReader:
    """Sequential bit reader over a readable binary stream."""

    __slots__ = ("_stream", "_buffer", "_count")

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._count = 0

    @property
    def aligned(self) -> bool:
        """True when no partially consumed byte is buffered."""
        return self._count == 0

    def read_bits(self, n: int) -> int:
        """
        Read and consume ``n`` bits (1 to 8) as an unsigned integer.

        :raises UnexpectedEndOfInput: if the stream ends first.
        """
        if not (1 <= n <= 8):
            raise ValueError(f"BitReader.read_bits: cannot read {n} bits at once")

        if self._count < n:
            byte = self._stream.read(1)
            if not byte:
                raise UnexpectedEndOfInput(
                    "QOI.decode: Unexpected end of input while reading bits"
                )
            self._buffer = (self._buffer << 8) | byte[0]
            self._count += 8

        self._count -= n
        value = self._buffer >> self._count
        self._buffer &= (1 << self._count) - 1
        return value

    def checkpoint(self) -> BitCheckpoint:
        """Capture the buffered bits so a read inside the same byte can be undone."""
        return BitCheckpoint(self._buffer, self._count)

    def restore(self, checkpoint: BitCheckpoint) -> None:
        """Undo every read made since ``checkpoint`` (same byte only)."""
        self._buffer, self._count = checkpoint
