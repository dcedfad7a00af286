"""
main.py

Reads words from standard input and prints them in every layout.
"""

from wordbox.words import read_words
from wordbox.layouts import Layout, render


words = read_words()

for layout in Layout:
    print(render(words, layout))
