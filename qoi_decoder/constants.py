# QOI Constants
QOI_MAGIC = b"qoif"
QOI_PIXELS_MAX = 400000000  # Safety limit (400MP)
QOI_INDEX_SIZE = 64

# 7 bytes of 0x00 followed by 1 byte of 0x01
QOI_END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"
