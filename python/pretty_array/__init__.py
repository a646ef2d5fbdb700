"""
pretty_array - Boxed text rendering of N-dimensional arrays
"""

import logging

from ._version import __version__

# Configuration
from .config import (
    DisplayOptions, display, set_display_options, get_display_options,
    reset_display_options, option_context
)

# Rendering
from .shape import get_shape, as_array
from .formatters import format_element, get_formatter
from .frames import render
from .printing import ArrayDisplay, print_array

from .exceptions import PrettyArrayError, NotAnArrayError, RaggedArrayError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    '__version__',
    'render',
    'get_shape',
    'as_array',
    'format_element',
    'get_formatter',
    'ArrayDisplay',
    'print_array',

    # Config
    'DisplayOptions', 'display', 'set_display_options', 'get_display_options',
    'reset_display_options', 'option_context',

    # Errors
    'PrettyArrayError', 'NotAnArrayError', 'RaggedArrayError'
]
