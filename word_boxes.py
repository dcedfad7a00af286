"""
word_boxes.py

Unified CLI for boxing words.

Layouts:
-layout row: all words side by side, centered in boxed cells
-layout page: one word per line between a top and bottom border
-layout table: one word per line with a border after each word
-layout all (default): row, page and table, in that order

Optional:
-width N: minimum field width for the row layout (default: longest word).
-file PATH: read words from a word list file instead of standard input.
-encoding NAME: text encoding of the -file word list (default: platform default).
-quiet: no prompt, banner or redraw; implied when stdin is not a terminal.
"""

import argparse
import sys

from wordbox.layouts import DEFAULT_WIDTH, Layout, render
from wordbox.words import load_word_list, read_words


LAYOUT_CHOICES = tuple(layout.value for layout in Layout) + ("all",)


def selected_layouts(choice):
    if choice == "all":
        return list(Layout)
    return [Layout(choice)]


def collect_words(path, quiet, encoding=None):
    if path is not None:
        return load_word_list(path, encoding)
    return read_words(prompt=not quiet and sys.stdin.isatty())


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render a list of words as ASCII boxes (row, page or table)."
    )
    parser.add_argument(
        "-layout",
        choices=LAYOUT_CHOICES,
        default="all",
        help="Layout to print (default: all).",
    )
    parser.add_argument(
        "-width",
        type=int,
        default=DEFAULT_WIDTH,
        help="Minimum field width for the row layout; negative means longest word.",
    )
    parser.add_argument(
        "-file",
        type=str,
        default=None,
        help="Read words from this file instead of standard input.",
    )
    parser.add_argument(
        "-encoding",
        type=str,
        default=None,
        help="Text encoding of the -file word list (default: platform default).",
    )
    parser.add_argument(
        "-quiet",
        action="store_true",
        help="Do not prompt for input.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        words = collect_words(args.file, args.quiet, args.encoding)
    except (OSError, ValueError, LookupError) as exc:
        raise SystemExit(f"could not read word list: {exc}") from exc

    for layout in selected_layouts(args.layout):
        print(render(words, layout, args.width))


if __name__ == "__main__":
    main()
