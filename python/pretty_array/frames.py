"""
Boxed text rendering of N-dimensional arrays.

Rank 1 is a single bordered line, rank 2 is one bordered line per row, and
every higher rank wraps each sub-array in its own frame:

    ┌                   ┐
    │┌                 ┐│
    ││ 1  2  3  4  5  6││
    ││ 7  8  9 10 11 12││
    │└                 ┘│
    └                   ┘

Only the innermost two axes are ever truncated; outer axes of a rank > 2
array are always shown in full.
"""

import logging
from typing import List, Optional

import numpy as np

from .config import DisplayOptions, display as global_display
from .formatters import get_formatter
from .layout import analyze, column_indices, row_indices
from .shape import as_array
from .truncation import MARKER, should_truncate

logger = logging.getLogger(__name__)

LT_ANGLE = "┌"
RT_ANGLE = "┐"
LB_ANGLE = "└"
RB_ANGLE = "┘"
V_BAR = "│"
NEWLINE = "\n"
SPACE = " "


def get_padding(ndim: int, strlen: int, pad: str = SPACE) -> str:
    """
    Padding between the corner glyphs of a frame around a rank ``ndim`` block.

    Each rank above two adds the two border columns of one nested frame.
    """
    return pad * (max(ndim - 2, 0) * 2 + strlen)


class _FrameRenderer:
    """Holds the per-render state shared by the recursive frame builders."""

    def __init__(self, arr: np.ndarray, options: DisplayOptions):
        self.arr = arr
        self.options = options
        self.formatter = get_formatter(arr.dtype, options.precision, options.suppress_exp)
        self.truncate = should_truncate(arr, options, self.formatter)
        self.max_row = analyze(arr, self.truncate, options, self.formatter)
        self.widths = self.max_row.widths
        self.rows = row_indices(arr, options.edge_items, self.truncate)
        self.cols = column_indices(arr, options.edge_items, self.truncate)

    def render(self) -> str:
        logger.debug(
            "Rendering array of shape %s (truncate=%s, strlen=%d)",
            self.arr.shape, self.truncate, self.max_row.strlen,
        )
        padding = get_padding(self.arr.ndim, self.max_row.strlen)
        parts = [LT_ANGLE + padding + RT_ANGLE + NEWLINE]
        if self.arr.ndim == 1:
            parts.append(self._frame_1d(self.arr))
        elif self.arr.ndim == 2:
            parts.extend(self._frame_2d(self.arr, V_BAR))
        else:
            parts.extend(self._frame_nd(self.arr, V_BAR))
        parts.append(LB_ANGLE + padding + RB_ANGLE + NEWLINE)
        return "".join(parts)

    def _cells(self, line: np.ndarray, align: bool = False) -> List[str]:
        cells = []
        for j, c in enumerate(self.cols):
            if c is None:
                cells.append(MARKER)
                continue
            s = self.formatter(line[c])
            if align:
                # right-align within the widest entry of the column
                s = s.rjust(self.widths[j])
            cells.append(s)
        return cells

    def _frame_1d(self, arr: np.ndarray) -> str:
        return V_BAR + SPACE.join(self._cells(arr)) + V_BAR + NEWLINE

    def _frame_2d(self, arr: np.ndarray, added_frame: str) -> List[str]:
        lines = []
        for r in self.rows:
            if r is None:
                body = MARKER * self.max_row.strlen
            else:
                body = SPACE.join(self._cells(arr[r], align=True))
            lines.append(added_frame + body + added_frame + NEWLINE)
        return lines

    def _frame_nd(self, arr: np.ndarray, added_frame: str) -> List[str]:
        lines = []
        for sub in arr:
            padding = get_padding(sub.ndim, self.max_row.strlen)
            lines.append(added_frame + LT_ANGLE + padding + RT_ANGLE + added_frame + NEWLINE)
            if sub.ndim > 2:
                lines.extend(self._frame_nd(sub, added_frame + V_BAR))
            else:
                lines.extend(self._frame_2d(sub, added_frame + V_BAR))
            lines.append(added_frame + LB_ANGLE + padding + RB_ANGLE + added_frame + NEWLINE)
        return lines


def render(array, options: Optional[DisplayOptions] = None) -> str:
    """
    Render an array as nested box-drawn frames.

    Parameters
    ----------
    array : array-like
        A rectangular numpy array or nested sequence of rank >= 1.
    options : DisplayOptions, optional
        Options for this call. The global options are used if omitted;
        either way they are read once, before rendering starts.

    Returns
    -------
    str
        The framed text, ending with a newline.

    Raises
    ------
    NotAnArrayError
        If ``array`` is a scalar.
    RaggedArrayError
        If ``array`` is not rectangular.

    Examples
    --------
    >>> print(render([200, 1, -3, 0, 0, 8501, 23]), end="")
    ┌                    ┐
    │200 1 -3 0 0 8501 23│
    └                    ┘
    """
    arr = as_array(array)
    snapshot = (options if options is not None else global_display).copy()
    return _FrameRenderer(arr, snapshot).render()
