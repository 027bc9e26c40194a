"""postbuild - patch the exported Hangman web build (dist/index.html) after the build step."""

__version__ = "1.0.0"
