#!/usr/bin/env python3
"""Add viewport meta tag + "Hangman Game" title to dist/index.html (run after the web export)."""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from postbuild.cli import add_viewport

if __name__ == "__main__":
    add_viewport()
