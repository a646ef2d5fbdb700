"""
Column width analysis for the innermost 2-D blocks of an array.
"""

from typing import Callable, List, NamedTuple

import numpy as np

from .truncation import MARKER, axis_truncated, cell_width, display_indices


class MaxRow(NamedTuple):
    """
    The widest formatted string seen in each displayed column.

    ``strlen`` is the rendered width of a 2-D line built from ``row``,
    separators included. It also sizes the padding of every enclosing frame.
    """
    strlen: int
    row: List[str]

    @property
    def widths(self) -> List[int]:
        return [cell_width(s) for s in self.row]


def as_blocks(arr: np.ndarray) -> np.ndarray:
    """
    View an array as a stack of 2-D blocks over its last two axes.

    A rank-1 array becomes one block holding a single row.
    """
    if arr.ndim == 1:
        return arr.reshape(1, 1, arr.shape[0])
    n_blocks = int(np.prod(arr.shape[:-2], dtype=np.int64))
    return arr.reshape(n_blocks, arr.shape[-2], arr.shape[-1])


def row_indices(arr: np.ndarray, edge_items: int, truncate: bool):
    """Displayed row indices of each innermost block (``[0]`` for rank 1)."""
    if arr.ndim == 1:
        return [0]
    n_rows = arr.shape[-2]
    return display_indices(n_rows, edge_items, axis_truncated(n_rows, edge_items, truncate))


def column_indices(arr: np.ndarray, edge_items: int, truncate: bool):
    n_cols = arr.shape[-1]
    return display_indices(n_cols, edge_items, axis_truncated(n_cols, edge_items, truncate))


def analyze(arr: np.ndarray, truncate: bool, options, formatter: Callable) -> MaxRow:
    """
    Build the row of widest elements and its rendered length.

    Every displayed row of every innermost block is measured, so all
    blocks of a higher-rank array share the same column widths. A column
    that falls on the truncation marker is set to the marker rather than
    measured.

    Parameters
    ----------
    arr : numpy.ndarray
        Array of rank >= 1.
    truncate : bool
        Whether the array is summarized.
    options : DisplayOptions
        Options snapshot for this render.
    formatter : Callable
        Element formatter resolved for ``arr.dtype``.

    Returns
    -------
    MaxRow
    """
    rows = row_indices(arr, options.edge_items, truncate)
    cols = column_indices(arr, options.edge_items, truncate)

    max_row = ["" if c is not None else MARKER for c in cols]
    for block in as_blocks(arr):
        for r in rows:
            if r is None:
                continue
            for j, c in enumerate(cols):
                if c is None:
                    continue
                s = formatter(block[r, c])
                if cell_width(s) > cell_width(max_row[j]):
                    max_row[j] = s

    if not max_row:
        return MaxRow(0, max_row)
    strlen = sum(cell_width(s) for s in max_row) + len(max_row) - 1
    return MaxRow(strlen, max_row)
