#!/usr/bin/env python3
"""Command-line interface for skill-porter-tui."""

import os
import sys

# Make the top-level modules importable when run from a checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def main():
    from main import main as run_main

    run_main()


if __name__ == "__main__":
    main()
