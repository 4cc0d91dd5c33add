from typing import BinaryIO, List

import numpy as np
from PIL import Image

from .constants import QOI_END_MARKER
from .header import Channels, Header
from .pixels import Pixel


def to_array(pixels: List[Pixel], header: Header) -> np.ndarray:
    """Return decoded pixels as a (height, width, 4) uint8 array."""
    return np.array(pixels, dtype=np.uint8).reshape(header.height, header.width, 4)


def to_image(pixels: List[Pixel], header: Header) -> Image.Image:
    """Build a Pillow image, dropping alpha when the file declares 3 channels."""
    img = Image.fromarray(to_array(pixels, header))
    if header.channels == Channels.RGB:
        img = img.convert("RGB")
    return img


def check_end_marker(stream: BinaryIO) -> bool:
    """Read the next 8 bytes and check them against the QOI end marker."""
    return stream.read(len(QOI_END_MARKER)) == QOI_END_MARKER
