from .bits import BitCheckpoint, BitReader
from .chunks import RGB, RGBA, ChunkKind, Diff, Index, Luma, Run, read_chunk
from .decoder import QOIDecoder, pixels_to_bytes, read_qoi
from .errors import AllocationFailure, InvalidFormat, QOIError, UnexpectedEndOfInput
from .header import Channels, Colorspace, Header, parse_header
from .pixels import ColorCache, DecodeState, Pixel, pixel_hash
from .utils import check_end_marker, to_array, to_image

__all__ = [
    "QOIDecoder",
    "read_qoi",
    "parse_header",
    "read_chunk",
    "pixels_to_bytes",
    "to_array",
    "to_image",
    "check_end_marker",
    "BitReader",
    "BitCheckpoint",
    "ChunkKind",
    "RGB",
    "RGBA",
    "Index",
    "Diff",
    "Luma",
    "Run",
    "Header",
    "Channels",
    "Colorspace",
    "Pixel",
    "ColorCache",
    "DecodeState",
    "pixel_hash",
    "QOIError",
    "UnexpectedEndOfInput",
    "InvalidFormat",
    "AllocationFailure",
]
