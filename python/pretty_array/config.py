"""
Global configuration for pretty_array display.
"""

import contextlib


class DisplayOptions:
    def __init__(self, edge_items=3, line_width=120, precision=6, suppress_exp=True, threshold=1000):
        # Number of items shown at each end of a truncated axis
        self.edge_items = edge_items

        # Maximum line width before a 1-D array is truncated
        self.line_width = line_width

        # Float precision for display (number of decimal places)
        self.precision = precision

        # Fixed-point notation if True, scientific notation otherwise
        self.suppress_exp = suppress_exp

        # Maximum total element count before truncation
        self.threshold = threshold

    def copy(self):
        """Return a detached copy of these options."""
        return DisplayOptions(**self.to_dict())

    def to_dict(self):
        return {
            'edge_items': self.edge_items,
            'line_width': self.line_width,
            'precision': self.precision,
            'suppress_exp': self.suppress_exp,
            'threshold': self.threshold,
        }

    def __eq__(self, other):
        if not isinstance(other, DisplayOptions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        params = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"DisplayOptions({params})"

# Singleton instance
display = DisplayOptions()

def set_display_options(edge_items=None, line_width=None, precision=None, suppress_exp=None, threshold=None):
    """
    Set global display options.

    Values are not validated; negative or zero values lead to undefined
    output. Only the options that are given are changed.

    Parameters
    ----------
    edge_items : int, optional
        Items shown at each edge of a truncated axis (default: 3).
    line_width : int, optional
        Max width of a 1-D line before it truncates (default: 120).
    precision : int, optional
        Number of decimal places for floating point numbers (default: 6).
    suppress_exp : bool, optional
        Use fixed-point instead of scientific notation (default: True).
    threshold : int, optional
        Max total element count before truncation (default: 1000).
    """
    if edge_items is not None:
        display.edge_items = edge_items
    if line_width is not None:
        display.line_width = line_width
    if precision is not None:
        display.precision = precision
    if suppress_exp is not None:
        display.suppress_exp = bool(suppress_exp)
    if threshold is not None:
        display.threshold = threshold

def get_display_options():
    """Return a snapshot of the current global display options."""
    return display.copy()

def reset_display_options():
    """Restore every global display option to its default."""
    set_display_options(**DisplayOptions().to_dict())

@contextlib.contextmanager
def option_context(**kwargs):
    """
    Temporarily set global display options.

    The previous values are restored on exit, including when the block
    raises.

    Examples
    --------
    >>> with option_context(precision=2):
    ...     print(render([[0.5, 1.25]]))
    """
    saved = display.to_dict()
    set_display_options(**kwargs)
    try:
        yield display
    finally:
        set_display_options(**saved)
