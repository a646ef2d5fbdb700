"""
Shape discovery and materialization of nested array input.
"""

from collections.abc import Mapping
from typing import Any, Tuple

import numpy as np

from .exceptions import NotAnArrayError, RaggedArrayError

def _is_scalar(obj: Any) -> bool:
    if isinstance(obj, (str, bytes, np.generic, Mapping)):
        return True
    return not hasattr(obj, '__len__') or not hasattr(obj, '__getitem__')

def get_shape(obj: Any) -> Tuple[int, ...]:
    """
    Get the shape of a nested array.

    Lengths are measured outermost first by following the first element
    down each level, so a ragged array is not detected here.

    Parameters
    ----------
    obj : array-like
        A numpy array or nested sequence of scalars.

    Returns
    -------
    tuple of int
        Per-dimension lengths.

    Raises
    ------
    NotAnArrayError
        If ``obj`` is a scalar.
    """
    if isinstance(obj, np.ndarray):
        if obj.ndim == 0:
            raise NotAnArrayError(obj)
        return tuple(int(n) for n in obj.shape)

    if _is_scalar(obj):
        raise NotAnArrayError(obj)

    dims = []
    while not _is_scalar(obj):
        dims.append(len(obj))
        if len(obj) == 0:
            break
        obj = obj[0]
    return tuple(dims)

def as_array(obj: Any) -> np.ndarray:
    """
    Materialize input into a rectangular numpy array.

    Raises
    ------
    NotAnArrayError
        If ``obj`` is a scalar.
    RaggedArrayError
        If the nested input is not rectangular.
    """
    probed = get_shape(obj)
    if isinstance(obj, np.ndarray):
        return obj

    try:
        arr = np.asarray(obj)
    except ValueError as e:
        raise RaggedArrayError(probed) from e

    if arr.shape != probed:
        raise RaggedArrayError(probed, tuple(arr.shape))
    return arr
