"""
bitboard.py - Winning-line masks for the 42-bit board layout

Every possible four-in-a-row on the 7x6 grid is stored as one integer mask
with exactly four bits set. A player has won when their occupancy contains
every bit of any mask. The masks are enumerated from cell coordinates rather
than written as literals, so the layout in canvas_connect4.utils is the single
source of truth.
"""

from typing import Dict, Iterator, List, Tuple

from canvas_connect4.utils import COLS, CONNECT_N, ROWS, cell_mask, is_valid_position

# (column step, row step) for each line orientation
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "vertical": (0, 1),
    "horizontal": (1, 0),
    "diagonal_up_right": (1, 1),
    "diagonal_up_left": (-1, 1),
}


def _line_cells(col: int, row: int, dc: int, dr: int) -> List[Tuple[int, int]]:
    return [(col + i * dc, row + i * dr) for i in range(CONNECT_N)]


def iter_lines(direction: str) -> Iterator[List[Tuple[int, int]]]:
    """Yield the (col, row) cells of every in-bounds line in one direction."""
    dc, dr = DIRECTIONS[direction]
    for row in range(ROWS):
        for col in range(COLS):
            cells = _line_cells(col, row, dc, dr)
            if all(is_valid_position(r, c) for c, r in cells):
                yield cells


def line_mask(cells: List[Tuple[int, int]]) -> int:
    mask = 0
    for col, row in cells:
        mask |= cell_mask(col, row)
    return mask


def generate_win_masks() -> Tuple[int, ...]:
    """
    Enumerate all winning-line masks.

    Vertical lines come first, then horizontal, then the two diagonals.
    On a 7x6 board that is 21 + 24 + 12 + 12 = 69 masks.

    Returns:
        Tuple of distinct masks, each with exactly CONNECT_N bits set
    """
    masks = []
    for direction in DIRECTIONS:
        for cells in iter_lines(direction):
            masks.append(line_mask(cells))
    return tuple(masks)


def mask_cells(mask: int) -> List[Tuple[int, int]]:
    """Decode a mask into its (col, row) cells, lowest bit first."""
    cells = []
    index = 0
    while mask:
        if mask & 1:
            cells.append((index % COLS, index // COLS))
        mask >>= 1
        index += 1
    return cells


WIN_MASKS: Tuple[int, ...] = generate_win_masks()
