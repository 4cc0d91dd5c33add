import io

import pytest

from conftest import END_MARKER, SAMPLE_CHUNKS, SAMPLE_PIXELS
from qoi_decoder import (
    AllocationFailure,
    InvalidFormat,
    QOIDecoder,
    UnexpectedEndOfInput,
    read_qoi,
)


def test_read_qoi(sample_qoi):
    header, pixels = read_qoi(io.BytesIO(sample_qoi))
    assert (header.width, header.height) == (7, 1)
    assert pixels == SAMPLE_PIXELS


def test_trailing_bytes_left_unread(sample_qoi):
    stream = io.BytesIO(sample_qoi + b"junk")
    read_qoi(stream)
    assert stream.read() == END_MARKER + b"junk"


def test_end_marker_not_required(make_qoi):
    _, pixels = read_qoi(io.BytesIO(make_qoi(7, 1, SAMPLE_CHUNKS, end_marker=False)))
    assert len(pixels) == 7


def test_two_pixel_image(make_qoi):
    # OP_INDEX(0) then OP_RUN of 1
    data = make_qoi(2, 1, b"\x00\xc0", channels=3)
    _, pixels = read_qoi(io.BytesIO(data))
    assert pixels == [(0, 0, 0, 0), (0, 0, 0, 0)]


def test_zero_pixels_reads_no_chunks(make_qoi):
    stream = io.BytesIO(make_qoi(0, 5, b"\xfe"))
    header, pixels = read_qoi(stream)
    assert header.pixel_count == 0
    assert pixels == []
    assert stream.tell() == 14


def test_run_spanning_rows(make_qoi):
    # 62 copies of red across a 4x4 image, the last run clamped
    data = make_qoi(4, 4, b"\xfe\xff\x00\x00" + b"\xfd")
    _, pixels = read_qoi(io.BytesIO(data))
    assert pixels == [(255, 0, 0, 255)] * 16


@pytest.mark.parametrize("cut", range(len(SAMPLE_CHUNKS)))
def test_truncated_chunk_stream(make_qoi, cut):
    data = make_qoi(7, 1, SAMPLE_CHUNKS[:cut], end_marker=False)
    with pytest.raises(UnexpectedEndOfInput):
        read_qoi(io.BytesIO(data))


def test_corrupted_magic(sample_qoi):
    with pytest.raises(InvalidFormat):
        read_qoi(io.BytesIO(b"qoi!" + sample_qoi[4:]))


def test_too_many_pixels(make_qoi):
    with pytest.raises(AllocationFailure):
        read_qoi(io.BytesIO(make_qoi(0xFFFFFFFF, 0xFFFFFFFF, b"")))


def test_decoding_is_repeatable(sample_qoi):
    first = read_qoi(io.BytesIO(sample_qoi))
    second = read_qoi(io.BytesIO(sample_qoi))
    assert first == second


def test_decoder_bytes(sample_qoi):
    decoded = QOIDecoder.decode(sample_qoi)
    assert decoded["width"] == 7
    assert decoded["height"] == 1
    assert decoded["channels"] == 4
    assert decoded["colorspace"] == 0
    assert decoded["data"] == bytes(v for p in SAMPLE_PIXELS for v in p)


def test_decoder_output_channels(sample_qoi):
    decoded = QOIDecoder.decode(sample_qoi, output_channels=3)
    assert decoded["channels"] == 3
    assert decoded["data"] == bytes(v for p in SAMPLE_PIXELS for v in p[:3])


def test_decoder_header_channels(make_qoi):
    decoded = QOIDecoder.decode(make_qoi(2, 1, b"\x00\xc0", channels=3))
    assert decoded["channels"] == 3
    assert decoded["data"] == bytes(6)


def test_decoder_offset(sample_qoi):
    data = b"\xaa" * 5 + sample_qoi + b"\xbb" * 3
    decoded = QOIDecoder.decode(data, byte_offset=5, byte_length=len(sample_qoi))
    assert decoded == QOIDecoder.decode(sample_qoi)


def test_decoder_invalid_output_channels(sample_qoi):
    with pytest.raises(ValueError):
        QOIDecoder.decode(sample_qoi, output_channels=2)
