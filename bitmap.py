from __future__ import annotations
import struct
import numpy as np
from colors import color_to_bitmap_bytes

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE

BYTES_PER_PIXEL = 3
ROW_ALIGNMENT = 4
BITS_PER_PIXEL = 24

# BITMAPFILEHEADER followed by BITMAPINFOHEADER, little-endian
header_struct = struct.Struct('<2sIHHIIiiHHIIiiII')


def row_stride(width: int) -> int:
    line_width = width * BYTES_PER_PIXEL
    return (line_width + ROW_ALIGNMENT - 1) // ROW_ALIGNMENT * ROW_ALIGNMENT


def pixel_array_size(width: int, height: int) -> int:
    return row_stride(width) * height


class PixelBuffer:
    """Row padded 24-bit pixel storage in bitmap order.

    ``data`` holds one numpy row per image row, bottom row first, each
    ``row_stride`` bytes long. Pixels are addressed top-down through
    ``write_pixel``.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"invalid buffer size: {width}x{height}")
        self.width = width
        self.height = height
        self.row_stride = row_stride(width)
        self.data = np.zeros((height, self.row_stride), dtype=np.uint8)

    @property
    def data_size(self) -> int:
        return self.data.size

    def get_pixel(self, col: int, row: int) -> int:
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"pixel ({col}, {row}) outside {self.width}x{self.height}")
        offset = col * BYTES_PER_PIXEL
        b, g, r = self.data[self.height - 1 - row, offset:offset + BYTES_PER_PIXEL]
        return (int(r) << 16) | (int(g) << 8) | int(b)

    def to_bytes(self) -> bytes:
        return self.data.tobytes()

    def to_rgb_array(self) -> np.ndarray:
        pixels = self.data[::-1, :self.width * BYTES_PER_PIXEL]
        pixels = pixels.reshape(self.height, self.width, BYTES_PER_PIXEL)
        return np.ascontiguousarray(pixels[:, :, ::-1])


def write_pixel(buffer: PixelBuffer, col: int, row: int, color: int):
    """Write ``color`` at column ``col`` and row ``row`` (row 0 is the top).

    Pixels outside the canvas are dropped without error; every shape fill
    relies on this instead of clipping its own geometry.
    """
    if row < 0 or col < 0 or row >= buffer.height or col >= buffer.width:
        return

    storage_row = buffer.height - 1 - row
    offset = col * BYTES_PER_PIXEL
    if offset + BYTES_PER_PIXEL > buffer.row_stride:
        return

    buffer.data[storage_row, offset:offset + BYTES_PER_PIXEL] = color_to_bitmap_bytes(color)


def encode_header(width: int, height: int) -> bytes:
    file_size = HEADER_SIZE + pixel_array_size(width, height)
    return header_struct.pack(
        b'BM',
        file_size,
        0,  # reserved
        0,  # reserved
        HEADER_SIZE,
        INFO_HEADER_SIZE,
        width,
        height,
        1,  # color planes
        BITS_PER_PIXEL,
        0,  # BI_RGB, uncompressed
        0,  # image size, may be 0 for BI_RGB
        0,
        0,
        0,
        0,
    )


def encode_bitmap(buffer: PixelBuffer) -> bytes:
    return encode_header(buffer.width, buffer.height) + buffer.to_bytes()
