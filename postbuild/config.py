"""
Configuration for the post-build patches.

Values come from the environment (a .env file is loaded if present) and are
read at call time, so CLI options and tests can override them.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_VIEWPORT_TITLE = "Hangman Game"
DEFAULT_MOBILE_TITLE = "Hangman Game - Multi-language Word Guessing Game"


def get_dist_dir():
    return Path(os.getenv("HANGMAN_DIST_DIR", PROJECT_ROOT / "dist"))


def get_html_path():
    """The built entry page both passes patch."""
    return Path(os.getenv("HANGMAN_HTML_PATH", get_dist_dir() / "index.html"))


def get_viewport_title():
    return os.getenv("HANGMAN_VIEWPORT_TITLE", DEFAULT_VIEWPORT_TITLE)


def get_mobile_title():
    return os.getenv("HANGMAN_MOBILE_TITLE", DEFAULT_MOBILE_TITLE)
