"""Plain-text rendering of a board, used by the command line debug mode.

Each row prints ``1`` above the peg holding a bean and ``0`` elsewhere, with
the slot counts underneath::

           1
         0   0
       0   0   0
       2   5   1

(three slots, spacing 3, one bean at the top).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from beancounter.utils.consts import DEFAULT_SPACING

if TYPE_CHECKING:
    from beancounter.interfaces.board import Board


def _validate_spacing(spacing: int) -> None:
    if spacing < 1 or spacing % 2 == 0:
        raise ValueError("spacing must be a positive odd number")


def _indent(slot_count: int, y: int, spacing: int) -> int:
    root = (slot_count - 1) * (spacing + 1) // 2 + (spacing + 1)
    return root - (spacing + 1) // 2 * y


def format_slots(board: "Board", spacing: int = DEFAULT_SPACING) -> str:
    """Slot bean counts, each right-aligned in ``spacing + 1`` columns."""
    _validate_spacing(spacing)
    width = spacing + 1
    return "".join(f"{count:>{width}d}" for count in board.get_slot_counts())


def format_board(board: "Board", spacing: int = DEFAULT_SPACING) -> str:
    """Render the peg triangle followed by the slot counts line."""
    _validate_spacing(spacing)
    lines = []
    for y in range(board.slot_count):
        bean_x = board.get_in_flight_x(y)
        cells = []
        for x in range(y + 1):
            width = _indent(board.slot_count, y, spacing) if x == 0 else spacing + 1
            cells.append(f"{int(x == bean_x):>{width}d}")
        lines.append("".join(cells))
    lines.append(format_slots(board, spacing))
    return "\n".join(lines)
