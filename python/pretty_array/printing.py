"""
Display helpers wrapping the frame renderer.
"""

import html
import sys
from typing import Any, Optional, TextIO

from .config import DisplayOptions, display as global_display
from .frames import render
from .shape import as_array


class ArrayDisplay:
    """
    A lightweight wrapper that shows an array as boxed text.
    Respects global display configuration at the time it is created.
    """
    def __init__(self, array: Any, options: Optional[DisplayOptions] = None):
        self.array = as_array(array)
        self.shape = tuple(self.array.shape)

        # Snapshot current config
        self.options = (options if options is not None else global_display).copy()

    def _format_ascii(self) -> str:
        return render(self.array, options=self.options)

    def _format_html(self) -> str:
        """
        Generate a preformatted HTML block for Jupyter.
        """
        return (
            '<pre style="font-family: monospace; line-height: 1.1;">'
            f'{html.escape(self._format_ascii())}'
            '</pre>'
        )

    def __str__(self):
        return self._format_ascii()

    def __repr__(self):
        return self._format_ascii()

    def _repr_html_(self):
        return self._format_html()


def print_array(array: Any, file: Optional[TextIO] = None, options: Optional[DisplayOptions] = None) -> None:
    """
    Render an array and write it to ``file`` (stdout by default).

    The string is fully rendered before anything is written.
    """
    text = render(array, options=options)
    (file if file is not None else sys.stdout).write(text)
