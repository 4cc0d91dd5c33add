import io
from typing import BinaryIO, List, Tuple

from .bits import BitReader
from .chunks import read_chunk
from .constants import QOI_PIXELS_MAX
from .errors import AllocationFailure
from .header import Header, parse_header
from .pixels import OPAQUE_BLACK, DecodeState, Pixel


def allocate_pixels(header: Header) -> List[Pixel]:
    total_pixels = header.pixel_count
    if total_pixels > QOI_PIXELS_MAX:
        raise AllocationFailure(
            f"QOI.decode: {header.width}x{header.height} exceeds the "
            f"{QOI_PIXELS_MAX} pixel limit"
        )
    try:
        return [OPAQUE_BLACK] * total_pixels
    except MemoryError as e:
        raise AllocationFailure(
            f"QOI.decode: Could not allocate {total_pixels} pixels"
        ) from e


def read_qoi(stream: BinaryIO) -> Tuple[Header, List[Pixel]]:
    """
    Decode one QOI image from ``stream``.

    Reads the header and exactly as many chunks as it takes to produce
    ``width * height`` pixels. Anything after the last chunk, including the
    end marker, is left unread.

    :param stream: Readable binary stream positioned at the start of the file.
    :return: The header and the pixels in row-major order.
    """
    header = parse_header(stream)
    state = DecodeState(allocate_pixels(header))
    bits = BitReader(stream)

    while not state.done:
        state.apply(read_chunk(bits))

    return header, state.pixels


class QOIDecoder:
    """
    A class to decode QOI (Quite OK Image) files into raw pixel data.
    """

    @staticmethod
    def decode(
        file_data: bytes,
        byte_offset: int = 0,
        byte_length: int = None,
        output_channels: int = None,
    ) -> dict:
        """
        Decode a QOI file given as a bytes/bytearray object.

        :param file_data: Bytes containing the QOI file.
        :param byte_offset: Offset to the start of the QOI file in file_data.
        :param byte_length: Length of the QOI file in bytes.
        :param output_channels: Number of channels to include in the decoded array (3 or 4).
                                If None, uses the channels defined in the file header.
        :return: Dictionary containing width, height, colorspace, channels, and data (bytes).
        """
        if output_channels is not None and output_channels not in (3, 4):
            raise ValueError(
                "QOI.decode: The number of channels for the output is invalid"
            )

        # --- Handle Slicing ---
        if byte_length is None:
            byte_length = len(file_data) - byte_offset

        # memoryview avoids copying the slice
        data = memoryview(file_data)[byte_offset : byte_offset + byte_length]

        header, pixels = read_qoi(io.BytesIO(data))

        if output_channels is None:
            output_channels = int(header.channels)

        description = header.as_description()
        description["channels"] = output_channels
        description["data"] = pixels_to_bytes(pixels, output_channels)
        return description


def pixels_to_bytes(pixels: List[Pixel], channels: int = 4) -> bytes:
    """Flatten pixels into interleaved RGBA (or RGB when ``channels`` is 3) bytes."""
    if channels == 4:
        return bytes(value for pixel in pixels for value in pixel)
    if channels == 3:
        return bytes(value for pixel in pixels for value in pixel[:3])
    raise ValueError("QOI.decode: The number of channels for the output is invalid")
