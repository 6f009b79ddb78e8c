from __future__ import annotations
import string

WHITE = 0xFFFFFF

COLOR_MASK = 0xFFFFFF


def rgb_to_color(r: int, g: int, b: int) -> int:
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def color_to_bitmap_bytes(color: int) -> tuple[int, int, int]:
    """Bytes of a 24-bit bitmap pixel for ``color``: blue, green, red."""
    color &= COLOR_MASK
    return (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF)


def parse_hex_color(hex_str: str) -> int:
    hex_str = hex_str.strip().lstrip('#')
    if not all(c in string.hexdigits for c in hex_str):
        raise ValueError(f"invalid hex color: {hex_str}")

    if len(hex_str) == 3:
        r = int(hex_str[0], 16) * 17
        g = int(hex_str[1], 16) * 17
        b = int(hex_str[2], 16) * 17
        return rgb_to_color(r, g, b)
    elif len(hex_str) == 6:
        return int(hex_str, 16)

    raise ValueError(f"invalid hex color: {hex_str}")


def parse_rgb_color(rgb_str: str) -> int:
    values = rgb_str.split(',')
    if len(values) != 3:
        raise ValueError(f"invalid R,G,B color: {rgb_str}")

    r = int(values[0].strip())
    g = int(values[1].strip())
    b = int(values[2].strip())

    r = max(0, min(255, r))
    g = max(0, min(255, g))
    b = max(0, min(255, b))

    return rgb_to_color(r, g, b)


def parse_color(color_str: str) -> int:
    """Accepts ``RRGGBB``, ``#RRGGBB``, ``#RGB`` or ``R,G,B``."""
    color_str = color_str.strip()
    if ',' in color_str:
        return parse_rgb_color(color_str)
    return parse_hex_color(color_str)
