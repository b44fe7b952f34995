from __future__ import annotations

from typing import Dict, Optional, Tuple

from falling_block_rl.game import Color

RGB = Tuple[int, int, int]

EMPTY: RGB = (20, 20, 26)

COLOR_RGB: Dict[Color, RGB] = {
    Color.BLUE: (0, 0, 240),
    Color.YELLOW: (240, 240, 0),
    Color.CYAN: (0, 240, 240),
    Color.WHITE: (230, 230, 230),
    Color.MAGENTA: (200, 0, 200),
    Color.RED: (240, 0, 0),
    Color.GREEN: (0, 240, 0),
}


def rgb_for(color: Optional[Color]) -> RGB:
    if color is None:
        return EMPTY
    return COLOR_RGB.get(color, (200, 200, 200))
