import struct

import pytest

END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"

# RGB, LUMA, RGBA, DIFF, RUN(2), INDEX(10)
SAMPLE_CHUNKS = (
    b"\xfe\x01\x02\x03"
    + b"\xad\xae"
    + b"\xff\x01\x02\x03\x04"
    + b"\x4d"
    + b"\xc1"
    + b"\x0a"
)

SAMPLE_PIXELS = [
    (1, 2, 3, 255),
    (16, 15, 22, 255),
    (1, 2, 3, 4),
    (255, 3, 2, 4),
    (255, 3, 2, 4),
    (255, 3, 2, 4),
    (16, 15, 22, 255),
]


def build_qoi(width, height, chunks, channels=4, colorspace=0, end_marker=True):
    data = b"qoif" + struct.pack(">IIBB", width, height, channels, colorspace) + chunks
    if end_marker:
        data += END_MARKER
    return data


@pytest.fixture
def make_qoi():
    return build_qoi


@pytest.fixture
def sample_qoi():
    """7x1 image touching every chunk kind."""
    return build_qoi(7, 1, SAMPLE_CHUNKS)
