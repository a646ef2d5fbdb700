import pytest
import numpy as np

import pretty_array
from pretty_array import DisplayOptions, render
from pretty_array.frames import get_padding
from pretty_array.truncation import MARKER

def pad(n):
    return " " * n

# --- 1. Untruncated frames ---

def test_render_1d():
    expected = (
        "┌" + pad(20) + "┐\n"
        "│200 1 -3 0 0 8501 23│\n"
        "└" + pad(20) + "┘\n"
    )
    assert render([200, 1, -3, 0, 0, 8501, 23]) == expected

def test_render_2d_right_aligned(iota):
    expected = (
        "┌    ┐\n"
        "│1  2│\n"
        "│3  4│\n"
        "│5  6│\n"
        "│7  8│\n"
        "│9 10│\n"
        "└    ┘\n"
    )
    assert render(iota(5, 2)) == expected

def test_render_3d(iota):
    expected = (
        "┌" + pad(19) + "┐\n"
        "│┌" + pad(17) + "┐│\n"
        "││ 1  2  3  4  5  6││\n"
        "││ 7  8  9 10 11 12││\n"
        "│└" + pad(17) + "┘│\n"
        "│┌" + pad(17) + "┐│\n"
        "││13 14 15 16 17 18││\n"
        "││19 20 21 22 23 24││\n"
        "│└" + pad(17) + "┘│\n"
        "└" + pad(19) + "┘\n"
    )
    assert render(iota(2, 2, 6)) == expected

def test_render_4d_nested_lists_share_column_widths():
    data = [1000, 21, 1232, 4, 5, 36, 1207, 18, 9, 10, -1, 12, 133, -14, 21915, 16]
    nested = [[[data[i:i + 2] for i in range(block, block + 8, 2)] for block in (0, 8)]]
    expected = (
        "┌" + pad(13) + "┐\n"
        "│┌" + pad(11) + "┐│\n"
        "││┌" + pad(9) + "┐││\n"
        "│││ 1000  21│││\n"
        "│││ 1232   4│││\n"
        "│││    5  36│││\n"
        "│││ 1207  18│││\n"
        "││└" + pad(9) + "┘││\n"
        "││┌" + pad(9) + "┐││\n"
        "│││    9  10│││\n"
        "│││   -1  12│││\n"
        "│││  133 -14│││\n"
        "│││21915  16│││\n"
        "││└" + pad(9) + "┘││\n"
        "│└" + pad(11) + "┘│\n"
        "└" + pad(13) + "┘\n"
    )
    assert render(nested) == expected

def test_render_4d_single_column(iota):
    def block(a, b):
        return (
            "│┌   ┐│\n"
            "││┌ ┐││\n"
            f"│││{a}│││\n"
            f"│││{b}│││\n"
            "││└ ┘││\n"
            "│└   ┘│\n"
        )
    expected = "┌     ┐\n" + block(1, 2) + block(3, 4) + block(5, 6) + "└     ┘\n"
    assert render(iota(3, 1, 2, 1)) == expected

def test_render_fixed_point_precision():
    data = [[0.000023, 1.234023, 13.443333], [479.311231, -100.001001, -0.412223]]
    expected = (
        "┌" + pad(20) + "┐\n"
        "│  0.00    1.23 13.44│\n"
        "│479.31 -100.00 -0.41│\n"
        "└" + pad(20) + "┘\n"
    )
    pretty_array.set_display_options(precision=2, suppress_exp=True)
    assert render(data) == expected

def test_render_scientific_keeps_special_tokens():
    opts = DisplayOptions(precision=2, suppress_exp=False)
    output = render([1.5, float('nan'), float('inf'), -float('inf')], options=opts)
    assert output.splitlines()[1] == "│1.50e+00 nan inf -inf│"

def test_render_strings():
    output = render([['a', 'bc'], ['def', 'g']])
    assert output.splitlines()[1:3] == ["│  a bc│", "│def  g│"]

def test_render_empty_1d():
    assert render([]) == "┌┐\n││\n└┘\n"

def test_render_empty_rows():
    assert render(np.zeros((0, 3), dtype=int)) == "┌  ┐\n└  ┘\n"

# --- 2. Truncation ---

def test_render_1d_truncated_on_line_width():
    expected = (
        "┌" + pad(21) + "┐\n"
        "│1 2 3 ░ 498 499 500│\n"
        "└" + pad(21) + "┘\n"
    )
    assert render(np.arange(1, 501)) == expected

def test_render_1d_truncated_on_threshold():
    pretty_array.set_display_options(threshold=5, edge_items=2)
    lines = render(np.arange(10)).splitlines()
    assert lines[1] == "│0 1 ░ 8 9│"
    assert lines[0] == "┌" + pad(11) + "┐"

def test_render_1d_within_line_width_not_truncated():
    output = render(np.array([1] * 61))
    assert MARKER not in output
    assert output.splitlines()[1] == "│" + " ".join(["1"] * 61) + "│"

def test_render_1d_window_not_exceeded_shows_everything():
    # 7 elements fit in a window of 2 * 3 + 1 positions
    pretty_array.set_display_options(line_width=5)
    assert render(np.arange(1, 8)).splitlines()[1] == "│1 2 3 4 5 6 7│"

def test_render_2d_truncated(iota):
    expected = (
        "┌" + pad(9) + "┐\n"
        "│ 1 ░  5│\n"
        "│" + MARKER * 9 + "│\n"
        "│16 ░ 20│\n"
        "└" + pad(9) + "┘\n"
    )
    opts = DisplayOptions(edge_items=1, threshold=10)
    assert render(iota(4, 5), options=opts) == expected

def test_render_3d_truncates_innermost_block_only(iota):
    expected = (
        "┌" + pad(11) + "┐\n"
        "│┌" + pad(9) + "┐│\n"
        "││ 1 ░  5││\n"
        "││" + MARKER * 9 + "││\n"
        "││16 ░ 20││\n"
        "│└" + pad(9) + "┘│\n"
        "│┌" + pad(9) + "┐│\n"
        "││21 ░ 25││\n"
        "││" + MARKER * 9 + "││\n"
        "││36 ░ 40││\n"
        "│└" + pad(9) + "┘│\n"
        "└" + pad(11) + "┘\n"
    )
    opts = DisplayOptions(edge_items=1, threshold=10)
    assert render(iota(2, 4, 5), options=opts) == expected

def test_render_outer_axes_never_truncated(iota):
    opts = DisplayOptions(edge_items=1, threshold=10)
    output = render(iota(8, 2, 2), options=opts)
    assert MARKER not in output
    assert output.count("┌") == 9

def test_render_2d_wide_rows_not_truncated_on_width(iota):
    arr = iota(2, 100) * 1000
    assert MARKER not in render(arr)

# --- 3. Properties ---

@pytest.mark.parametrize("shape", [(10,), (4, 7), (3, 5, 2), (2, 2, 3, 4)])
def test_no_marker_below_limits(shape):
    rng = np.random.default_rng(0)
    arr = rng.integers(-50, 50, size=shape)
    assert MARKER not in render(arr)

@pytest.mark.parametrize("edge_items", [1, 2, 3, 4])
def test_1d_truncation_shows_edges(edge_items):
    arr = np.arange(100, 400)
    pretty_array.set_display_options(edge_items=edge_items)
    line = render(arr).splitlines()[1].strip("│")
    left, right = line.split(f" {MARKER} ")
    assert left.split() == [str(v) for v in arr[:edge_items]]
    assert right.split() == [str(v) for v in arr[-edge_items:]]

@pytest.mark.parametrize("edge_items", [1, 2, 3])
def test_2d_single_marker_row(edge_items):
    arr = np.arange(60 * 40).reshape(60, 40)
    pretty_array.set_display_options(edge_items=edge_items)
    body = render(arr).splitlines()[1:-1]
    marker_rows = [i for i, line in enumerate(body) if set(line.strip("│")) == {MARKER}]
    assert marker_rows == [edge_items]
    assert len(body) == 2 * edge_items + 1

def test_render_idempotent():
    arr = np.linspace(-3.0, 3.0, 2400).reshape(2, 30, 40)
    assert render(arr) == render(arr)

def test_alignment_of_untruncated_columns():
    data = [[1, -200, 3], [45, 6, 78901], [-7, 8, 9]]
    body = [line.strip("│") for line in render(data).splitlines()[1:-1]]
    widths = [max(len(str(row[j])) for row in data) for j in range(3)]
    assert {len(line) for line in body} == {sum(widths) + 2}
    for line in body:
        start = 0
        for j, width in enumerate(widths):
            cell = line[start:start + width]
            assert cell == cell.strip().rjust(width)
            start += width + 1

def test_get_padding():
    assert get_padding(1, 20) == pad(20)
    assert get_padding(2, 4) == pad(4)
    assert get_padding(3, 17) == pad(19)
    assert get_padding(4, 1, pad="-") == "-" * 5

# --- 4. Errors ---

def test_render_scalar_fails():
    with pytest.raises(pretty_array.NotAnArrayError):
        render(5)

def test_render_ragged_fails():
    with pytest.raises(pretty_array.RaggedArrayError):
        render([[1, 2], [3]])
