import pytest
import numpy as np

import pretty_array

@pytest.fixture(autouse=True)
def default_display_options():
    """Every test starts and ends with the default global options."""
    pretty_array.reset_display_options()
    yield
    pretty_array.reset_display_options()

@pytest.fixture
def iota():
    """Returns a factory for 1-based integer arrays of a given shape."""
    def _iota(*shape):
        return np.arange(1, int(np.prod(shape)) + 1).reshape(shape)
    return _iota
