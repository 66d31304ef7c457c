from typing import Optional, Tuple

from hexstack.constants import (
    BOARD_CENTER_X_PCT,
    BOARD_CENTER_Y_PCT,
    HAND_SIZE,
    HAND_SLOT_RADIUS,
    HAND_SLOT_SPACING,
    HAND_TRAY_Y,
    HEX_SIZE,
    PLAY_AGAIN_HEIGHT,
    PLAY_AGAIN_OFFSET_Y,
    PLAY_AGAIN_WIDTH,
)
from hexstack.utils.hex_math import Coord, axial_to_pixel, pixel_to_axial


def board_center(window_width: float, window_height: float) -> Tuple[float, float]:
    return window_width * BOARD_CENTER_X_PCT, window_height * BOARD_CENTER_Y_PCT


def cell_center(q: int, r: int, window_width: float, window_height: float) -> Tuple[float, float]:
    """Screen position of a cell. Arcade's y axis points up, so axial y is flipped."""
    cx, cy = board_center(window_width, window_height)
    x, y = axial_to_pixel(q, r, HEX_SIZE)
    return cx + x, cy - y


def screen_to_axial(x: float, y: float, window_width: float, window_height: float) -> Coord:
    """Inverse of cell_center; mirrors its y flip."""
    cx, cy = board_center(window_width, window_height)
    return pixel_to_axial(x - cx, cy - y, HEX_SIZE)


def hand_slot_center(index: int, window_width: float) -> Tuple[float, float]:
    offset = index - (HAND_SIZE - 1) / 2
    return window_width / 2 + offset * HAND_SLOT_SPACING, HAND_TRAY_Y


def hand_slot_at(x: float, y: float, window_width: float) -> Optional[int]:
    for index in range(HAND_SIZE):
        sx, sy = hand_slot_center(index, window_width)
        if (x - sx) ** 2 + (y - sy) ** 2 <= HAND_SLOT_RADIUS ** 2:
            return index
    return None


def play_again_bounds(window_width: float, window_height: float) -> Tuple[float, float, float, float]:
    """(left, right, bottom, top) of the play-again button on the game-over overlay."""
    cx = window_width / 2
    cy = window_height / 2 + PLAY_AGAIN_OFFSET_Y
    return (
        cx - PLAY_AGAIN_WIDTH / 2,
        cx + PLAY_AGAIN_WIDTH / 2,
        cy - PLAY_AGAIN_HEIGHT / 2,
        cy + PLAY_AGAIN_HEIGHT / 2,
    )


def point_in_play_again(x: float, y: float, window_width: float, window_height: float) -> bool:
    left, right, bottom, top = play_again_bounds(window_width, window_height)
    return left <= x <= right and bottom <= y <= top
