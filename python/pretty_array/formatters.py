"""
Scalar formatting for array elements.
"""

import math
from typing import Any, Callable

import numpy as np

def _format_int(val) -> str:
    return str(int(val))

def _format_bool(val) -> str:
    return str(bool(val))

def _make_float_formatter(precision: int, suppress_exp: bool) -> Callable[[Any], str]:
    spec = f".{precision}{'f' if suppress_exp else 'e'}"

    def _format_float(val) -> str:
        val = float(val)
        # Non-finite values keep their literal tokens under any notation
        if math.isnan(val):
            return "nan"
        if math.isinf(val):
            return "inf" if val > 0 else "-inf"
        return format(val, spec)

    return _format_float

def get_formatter(dtype, precision: int = 6, suppress_exp: bool = True) -> Callable[[Any], str]:
    """
    Resolve the element formatter for an array dtype.

    The scalar kind is decided once per array, so every element of a
    rendered array goes through the same formatting function.

    Parameters
    ----------
    dtype : numpy.dtype or type
        The dtype of the array being rendered.
    precision : int
        Number of fractional digits for floating values.
    suppress_exp : bool
        Fixed-point notation if True, scientific notation otherwise.

    Returns
    -------
    Callable
        A function mapping one element to its display string.
    """
    kind = np.dtype(dtype).kind
    if kind in 'iu':
        return _format_int
    if kind == 'b':
        return _format_bool
    if kind == 'f':
        return _make_float_formatter(precision, suppress_exp)
    return str

def format_element(val: Any, precision: int = 6, suppress_exp: bool = True) -> str:
    """
    Format a single scalar.

    Examples
    --------
    >>> format_element(-3)
    '-3'
    >>> format_element(13.443333, precision=2)
    '13.44'
    >>> format_element(float('nan'), suppress_exp=False)
    'nan'
    """
    if isinstance(val, (bool, np.bool_)):
        return _format_bool(val)
    if isinstance(val, (int, np.integer)):
        return _format_int(val)
    if isinstance(val, (float, np.floating)):
        return _make_float_formatter(precision, suppress_exp)(val)
    return str(val)
