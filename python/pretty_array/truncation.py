"""
Truncation policy: when an array is summarized and which indices stay visible.

A truncated axis of length ``n`` is shown through a window of
``2 * edge_items + 1`` display positions: the first ``edge_items`` real
indices, one marker slot, and the last ``edge_items`` real indices.
"""

from typing import Callable, List, Optional

import numpy as np

MARKER = "░"

# Width charged to the marker in all padding arithmetic. This is fixed and
# does not match the single cell the glyph occupies on screen.
MARKER_WIDTH = 3

def cell_width(s: str) -> int:
    """Width of a formatted cell as used for alignment and frame padding."""
    return MARKER_WIDTH if s == MARKER else len(s)

def window_length(edge_items: int) -> int:
    return 2 * edge_items + 1

def should_truncate(arr: np.ndarray, options, formatter: Callable) -> bool:
    """
    Decide whether an array is summarized.

    Any array is truncated when its element count exceeds
    ``options.threshold``. A rank-1 array is also truncated when the
    concatenated length of its formatted elements exceeds
    ``options.line_width``;
    higher ranks never truncate on width alone.
    """
    if arr.size > options.threshold:
        return True
    if arr.ndim != 1 or arr.size == 0:
        return False
    width = sum(cell_width(formatter(val)) for val in arr)
    return width > options.line_width

def axis_truncated(length: int, edge_items: int, truncate: bool) -> bool:
    """An axis only truncates when it is strictly longer than the window."""
    return truncate and length > window_length(edge_items)

def real_index(position: int, window_len: int, length: int, edge_items: int) -> Optional[int]:
    """
    Map a display position inside a truncation window to a real index.

    Returns ``None`` for the marker slot.

    Examples
    --------
    >>> [real_index(p, 7, 500, 3) for p in range(7)]
    [0, 1, 2, None, 497, 498, 499]
    """
    if position < edge_items:
        return position
    if position == edge_items:
        return None
    return length - (window_len - position)

def display_indices(length: int, edge_items: int, truncated: bool) -> List[Optional[int]]:
    """Real indices to display along one axis, with ``None`` for the marker."""
    if not truncated:
        return list(range(length))
    window_len = window_length(edge_items)
    return [real_index(p, window_len, length, edge_items) for p in range(window_len)]
