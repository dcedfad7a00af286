"""
words.py

Handles collecting words into a WordList, either interactively from a
prompt or from a word list file.
No numpy here, just clean text handling.
"""

import sys


PROMPT = "$> "
BANNER = (
    "Type in a list of words.",
    "Input stops when you enter an empty line.",
)
# Cursor up one line, then erase it
REDRAW = "\033[A\033[2K"
END_OF_INPUT = PROMPT + "[END OF INPUT]"


class WordList:
    """
    Ordered collection of words that keeps track of its longest word.

    Words can only be appended (until reset), so max_length is updated
    on every append and never has to be recomputed.
    """

    def __init__(self, words=()):
        self._words = []
        self._max_length = 0
        self.append(words)

    def append(self, words):
        """Append a batch of words, in order."""
        if isinstance(words, str):
            raise TypeError("expected a sequence of words, not a single str")
        batch = list(words)
        if not batch:
            return
        self._words.extend(batch)
        self._max_length = max(self._max_length, max(len(w) for w in batch))

    def reset(self):
        self._words.clear()
        self._max_length = 0

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self._words)

    def is_empty(self) -> bool:
        return not self._words

    def size(self) -> int:
        return len(self._words)

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __repr__(self):
        return f"WordList({self._words!r})"


def split_line(line: str) -> list[str]:
    """Split a raw line into non-empty whitespace-separated tokens."""
    return line.strip().split()


def read_words(stream=None, out=None, prompt=True) -> WordList:
    """
    Prompt for lines of words until an empty line or end of input.

    Each non-blank line is split on whitespace and appended as one batch.
    With prompt=False nothing is written to out, which is what you want
    when input is piped in.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    words = WordList()

    if prompt:
        for line in BANNER:
            print(line, file=out)

    while True:
        if prompt:
            print(PROMPT, end="", file=out, flush=True)
        raw = stream.readline()

        if not raw:
            # Stream closed without an empty line; keep the redraw aligned
            if prompt:
                print(file=out)
            break

        tokens = split_line(raw)
        if not tokens:
            break
        words.append(tokens)

    if prompt:
        print(REDRAW + END_OF_INPUT, file=out, flush=True)

    return words


def load_word_list(path, encoding=None) -> WordList:
    """
    Load a word list file; blank lines are skipped, not a stop marker.

    encoding=None uses the platform default. Undecodable bytes raise
    UnicodeDecodeError.
    """
    words = WordList()
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            tokens = split_line(line)
            if tokens:
                words.append(tokens)
    return words
