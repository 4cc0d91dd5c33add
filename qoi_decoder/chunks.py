"""
Chunk tag and payload decoding.

Every chunk starts on a byte boundary with a 2 bit tag:

    00 iiiiii                             index
    01 rrggbb                             diff  (bias 2)
    10 gggggg rrrrbbbb                    luma  (bias 32, 8, 8)
    11 rrrrrr                             run   (length = value + 1)
    11111110 rrrrrrrr gggggggg bbbbbbbb   rgb
    11111111 rrrrrrrr gggggggg bbbbbbbb aaaaaaaa  rgba

Payload fields are kept raw; biases are applied when the chunk is turned
into pixels.
"""

from enum import Enum
from typing import NamedTuple, Union

from .bits import BitReader


class ChunkKind(Enum):
    RGB = "rgb"
    RGBA = "rgba"
    INDEX = "index"
    DIFF = "diff"
    LUMA = "luma"
    RUN = "run"


class RGB(NamedTuple):
    red: int
    green: int
    blue: int


class RGBA(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int


class Index(NamedTuple):
    position: int


class Diff(NamedTuple):
    dr: int
    dg: int
    db: int


class Luma(NamedTuple):
    dg: int
    dr_dg: int
    db_dg: int


class Run(NamedTuple):
    value: int

    @property
    def length(self) -> int:
        return self.value + 1


Chunk = Union[RGB, RGBA, Index, Diff, Luma, Run]

# kind -> (chunk type, bit width of each field in stream order)
PAYLOADS = {
    ChunkKind.RGB: (RGB, (8, 8, 8)),
    ChunkKind.RGBA: (RGBA, (8, 8, 8, 8)),
    ChunkKind.INDEX: (Index, (6,)),
    ChunkKind.DIFF: (Diff, (2, 2, 2)),
    ChunkKind.LUMA: (Luma, (6, 4, 4)),
    ChunkKind.RUN: (Run, (6,)),
}

_TWO_BIT_TAGS = {
    0b00: ChunkKind.INDEX,
    0b01: ChunkKind.DIFF,
    0b10: ChunkKind.LUMA,
}


def decode_tag(bits: BitReader) -> ChunkKind:
    """Classify the next chunk, consuming only its tag bits."""
    prefix = bits.read_bits(2)
    if prefix in _TWO_BIT_TAGS:
        return _TWO_BIT_TAGS[prefix]

    # 11xxxxxx is either the 8 bit rgb/rgba tag or a run whose 6 bits of
    # payload follow the prefix. Tags start on a byte boundary, so the
    # peeked bits never leave the current byte.
    checkpoint = bits.checkpoint()
    suffix = bits.read_bits(6)
    if suffix == 0b111110:
        return ChunkKind.RGB
    if suffix == 0b111111:
        return ChunkKind.RGBA
    bits.restore(checkpoint)
    return ChunkKind.RUN


def decode_payload(bits: BitReader, kind: ChunkKind) -> Chunk:
    chunk_type, widths = PAYLOADS[kind]
    return chunk_type(*[bits.read_bits(width) for width in widths])


def read_chunk(bits: BitReader) -> Chunk:
    """Read one complete chunk (tag and payload) from ``bits``."""
    return decode_payload(bits, decode_tag(bits))
