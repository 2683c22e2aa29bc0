from __future__ import annotations

from typing import Dict, Tuple

Color = Tuple[int, int, int]

PALETTE: Dict[int, Color] = {
    0: (30, 30, 36),
    1: (255, 13, 114),   # I
    2: (13, 194, 255),   # J
    3: (13, 255, 114),   # L
    4: (245, 56, 255),   # O
    5: (255, 142, 13),   # S
    6: (255, 225, 56),   # T
    7: (56, 119, 255),   # Z
}


def color_for_value(v: int) -> Color:
    return PALETTE.get(abs(int(v)), (200, 200, 200))
