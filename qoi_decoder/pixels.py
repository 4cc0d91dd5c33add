"""
Pixel reconstruction: the running state that turns chunks into pixels.
"""

from typing import List, NamedTuple

from .chunks import RGB, RGBA, Chunk, Diff, Index, Luma, Run
from .constants import QOI_INDEX_SIZE


class Pixel(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int


OPAQUE_BLACK = Pixel(0, 0, 0, 255)
TRANSPARENT_BLACK = Pixel(0, 0, 0, 0)


def pixel_hash(pixel: Pixel) -> int:
    """Calculates the index position for the color cache."""
    r, g, b, a = pixel
    return (r * 3 + g * 5 + b * 7 + a * 11) % QOI_INDEX_SIZE


class ColorCache:
    """
    64 slot table of recently seen pixels.

    Slots are addressed by ``pixel_hash``; on a collision the newest pixel
    simply overwrites the old one.
    """

    __slots__ = ("slots",)

    def __init__(self) -> None:
        self.slots = [TRANSPARENT_BLACK] * QOI_INDEX_SIZE

    def __getitem__(self, position: int) -> Pixel:
        return self.slots[position]

    def store(self, pixel: Pixel) -> None:
        self.slots[pixel_hash(pixel)] = pixel


class DecodeState:
    """
    Previous pixel, color cache and output buffer for a single decode.

    ``pixels`` is pre-sized to ``total`` entries and filled front to back;
    ``written`` counts the entries produced so far.
    """

    def __init__(self, pixels: List[Pixel]) -> None:
        self.previous = OPAQUE_BLACK
        self.cache = ColorCache()
        self.pixels = pixels
        self.total = len(pixels)
        self.written = 0

    @property
    def done(self) -> bool:
        return self.written >= self.total

    def apply(self, chunk: Chunk) -> None:
        """Append the pixel(s) described by ``chunk``."""
        prev = self.previous

        if isinstance(chunk, Run):
            # Never write past the end of the image.
            count = min(chunk.length, self.total - self.written)
            self.pixels[self.written : self.written + count] = [prev] * count
            self.written += count
            # The cache must hold the last emitted pixel, runs included.
            self.cache.store(prev)
            return

        if isinstance(chunk, Index):
            pixel = self.cache[chunk.position]
        else:
            if isinstance(chunk, RGB):
                pixel = Pixel(chunk.red, chunk.green, chunk.blue, prev.alpha)
            elif isinstance(chunk, RGBA):
                pixel = Pixel(*chunk)
            elif isinstance(chunk, Diff):
                # Extract 2-bit differences and subtract bias of 2
                pixel = Pixel(
                    (prev.red + chunk.dr - 2) & 0xFF,
                    (prev.green + chunk.dg - 2) & 0xFF,
                    (prev.blue + chunk.db - 2) & 0xFF,
                    prev.alpha,
                )
            elif isinstance(chunk, Luma):
                dg = chunk.dg - 32
                pixel = Pixel(
                    (prev.red + dg + chunk.dr_dg - 8) & 0xFF,
                    (prev.green + dg) & 0xFF,
                    (prev.blue + dg + chunk.db_dg - 8) & 0xFF,
                    prev.alpha,
                )
            else:
                raise TypeError(f"DecodeState.apply: unknown chunk {chunk!r}")
            self.cache.store(pixel)

        self.pixels[self.written] = pixel
        self.written += 1
        self.previous = pixel
