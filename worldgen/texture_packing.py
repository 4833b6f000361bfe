"""Row padding of image data for GPU texture uploads."""

import numpy as np

ROW_ALIGNMENT = 256


def align_to(value: int, alignment: int) -> int:
    """Round ``value`` up to a multiple of ``alignment`` (a power of two)."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a power of two, got {alignment}")
    return (value + alignment - 1) & ~(alignment - 1)


def _pad_rows(width: int, height: int, pixels, dtype: str, channels: int) -> tuple[bytes, int]:
    data = np.asarray(pixels, dtype=dtype).ravel()
    expected = width * height * channels
    if data.size != expected:
        raise ValueError(f"expected {expected} values for {width}x{height}, got {data.size}")
    item = data.dtype.itemsize
    padded_bpr = align_to(width * channels * item, ROW_ALIGNMENT)
    row_items = padded_bpr // item
    out = np.zeros((height, row_items), dtype=dtype)
    out[:, : width * channels] = data.reshape(height, width * channels)
    return out.tobytes(), padded_bpr


def pack_u16_rows_padded(width: int, height: int, pixels) -> tuple[bytes, int]:
    """Pack 16-bit pixels (little-endian) with rows padded to 256 bytes.

    Returns the packed bytes and the padded bytes per row.
    """
    return _pad_rows(width, height, pixels, "<u2", 1)


def pack_rgba8_rows_padded(width: int, height: int, rgba) -> tuple[bytes, int]:
    """Pack RGBA8 data with rows padded to 256 bytes."""
    if isinstance(rgba, (bytes, bytearray, memoryview)):
        rgba = np.frombuffer(rgba, dtype=np.uint8)
    return _pad_rows(width, height, rgba, "u1", 4)


def pack_f32_rows_padded(width: int, height: int, pixels) -> tuple[bytes, int]:
    """Pack 32-bit float pixels (little-endian) with rows padded to 256 bytes."""
    return _pad_rows(width, height, pixels, "<f4", 1)


def rgb_to_rgba(rgb) -> bytes:
    """Expand packed RGB8 triples to RGBA8 with opaque alpha."""
    data = np.frombuffer(bytes(rgb), dtype=np.uint8)
    if data.size % 3:
        raise ValueError("RGB data length must be a multiple of 3")
    out = np.full((data.size // 3, 4), 255, dtype=np.uint8)
    out[:, :3] = data.reshape(-1, 3)
    return out.tobytes()