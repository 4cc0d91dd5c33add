import struct
from enum import IntEnum
from typing import BinaryIO, NamedTuple

from .constants import QOI_MAGIC
from .errors import InvalidFormat, UnexpectedEndOfInput


class Channels(IntEnum):
    RGB = 3
    RGBA = 4


class Colorspace(IntEnum):
    SRGB = 0
    LINEAR = 1


class Header(NamedTuple):
    width: int
    height: int
    channels: Channels
    colorspace: Colorspace

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def as_description(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "channels": int(self.channels),
            "colorspace": int(self.colorspace),
        }


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise UnexpectedEndOfInput."""
    data = stream.read(size)
    if data is None or len(data) < size:
        raise UnexpectedEndOfInput(
            f"QOI.decode: Expected {size} bytes, got {0 if not data else len(data)}"
        )
    return data


def parse_header(stream: BinaryIO) -> Header:
    """
    Parse the 14 byte QOI header at the current stream position.

    :param stream: Readable binary stream positioned at the start of the file.
    :return: The parsed Header.
    """
    # QOI Header is 14 bytes:
    # magic(4), width(4), height(4), channels(1), colorspace(1)
    magic = read_exact(stream, 4)
    if magic != QOI_MAGIC:
        raise InvalidFormat("QOI.decode: The signature of the QOI file is invalid")

    # > : Big Endian
    # I : unsigned int (4 bytes)
    width, height = struct.unpack(">II", read_exact(stream, 8))

    channels = read_exact(stream, 1)[0]
    if channels not in (3, 4):
        raise InvalidFormat(
            "QOI.decode: The number of channels declared in the file is invalid"
        )

    colorspace = read_exact(stream, 1)[0]
    if colorspace not in (0, 1):
        raise InvalidFormat(
            "QOI.decode: The colorspace declared in the file is invalid"
        )

    return Header(width, height, Channels(channels), Colorspace(colorspace))

