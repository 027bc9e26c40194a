#!/usr/bin/env python3
"""Inject the mobile-responsive CSS into dist/index.html (run after the web export)."""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from postbuild.cli import build_mobile_responsive

if __name__ == "__main__":
    build_mobile_responsive()
