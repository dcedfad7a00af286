"""Shared pytest setup for the wordbox test suite.

The ``wordbox`` package and the ``word_boxes`` CLI module live at the
repository root, so the root goes on ``sys.path`` before tests import them.
"""

import os
import sys

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
