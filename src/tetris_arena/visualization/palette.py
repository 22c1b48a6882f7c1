from __future__ import annotations

from typing import Dict, Tuple

Color = Tuple[int, int, int]


def hex_to_rgb(value: str) -> Color:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


BACKGROUND: Color = hex_to_rgb("#102027")
TEXT: Color = (236, 239, 241)

# Color ids 1..7 follow the shape catalog order I, J, L, O, S, T, Z
PALETTE: Dict[int, Color] = {
    1: hex_to_rgb("#e57373"),
    2: hex_to_rgb("#ba68c8"),
    3: hex_to_rgb("#64b5f6"),
    4: hex_to_rgb("#81c784"),
    5: hex_to_rgb("#fff176"),
    6: hex_to_rgb("#ff8a65"),
    7: hex_to_rgb("#90a4ae"),
}


def color_for_value(v: int) -> Color:
    """Display color for a cell; the falling piece is overlaid with negative ids."""
    if v == 0:
        return BACKGROUND
    return PALETTE.get(abs(int(v)), (200, 200, 200))
