"""
layouts.py

Renders a WordList as one of three fixed-width ASCII box layouts.

ROW
    +-----+--------+-----+
    | moo | foobar | baz |
    +-----+--------+-----+

PAGE
    +--------+
    | moo    |
    | foobar |
    | baz    |
    +--------+

TABLE
    +--------+
    | moo    |
    +--------+
    | foobar |
    +--------+
    | baz    |
    +--------+

Widths are measured in characters (len), not terminal columns.
"""

import enum

import numpy as np


DEFAULT_WIDTH = -1


class Layout(enum.Enum):
    ROW = "row"
    PAGE = "page"
    TABLE = "table"


def field_widths(word_list, width: int = DEFAULT_WIDTH) -> tuple[np.ndarray, np.ndarray]:
    """
    Compute per-word lengths and field widths for the row layout.

    width is a minimum: a longer word widens its own field and is never
    truncated. A negative width falls back to the longest word.
    """
    if width < 0:
        width = word_list.max_length

    lengths = np.fromiter(
        (len(w) for w in word_list), dtype=np.int64, count=len(word_list)
    )
    return lengths, np.maximum(width, lengths)


def render_row(word_list, width: int = DEFAULT_WIDTH) -> str:
    """
    Render all words side by side in a single row of centered cells.

    Each cell holds one space of padding on either side of its field.
    When the free space in a field is odd, the extra space goes after
    the word.
    """
    lengths, widths = field_widths(word_list, width)
    free = widths - lengths
    left = free // 2
    right = free - left

    border = "+" + "".join("-" * (int(fw) + 2) + "+" for fw in widths)
    cells = "".join(
        " " + " " * int(lp) + w + " " * int(rp) + " |"
        for w, lp, rp in zip(word_list, left, right)
    )
    return f"{border}\n|{cells}\n{border}\n"


def _page_border(word_list) -> str:
    return "+-" + "-" * (word_list.max_length + 1) + "+\n"


def _page_line(word, max_length: int) -> str:
    return "| " + word.ljust(max_length) + " |\n"


def render_page(word_list) -> str:
    """Render words one per line, left-aligned, between two borders."""
    border = _page_border(word_list)
    if word_list.is_empty():
        return border

    lines = [border]
    lines.extend(_page_line(w, word_list.max_length) for w in word_list)
    lines.append(border)
    return "".join(lines)


def render_table(word_list) -> str:
    """Like render_page, with a border after every word."""
    border = _page_border(word_list)
    lines = [border]
    for w in word_list:
        lines.append(_page_line(w, word_list.max_length))
        lines.append(border)
    return "".join(lines)


_RENDERERS = {
    Layout.PAGE: render_page,
    Layout.TABLE: render_table,
}


def render(word_list, layout, width: int = DEFAULT_WIDTH) -> str:
    """
    Render word_list in the given Layout.

    Strings are not coerced; convert with Layout(value) at the edge
    (the CLI does, from a closed set of choices). Anything that is not a
    Layout member raises TypeError.
    """
    if not isinstance(layout, Layout):
        raise TypeError(f"layout must be a Layout, not {layout!r}")
    if layout is Layout.ROW:
        return render_row(word_list, width)
    return _RENDERERS[layout](word_list)
