#!/usr/bin/env python3
"""
Entry point for running as module: python -m startup_namer
"""

from startup_namer.app import run


if __name__ == "__main__":
    run()
