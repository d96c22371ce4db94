#!/usr/bin/env python3
"""
ABOUTME: Entry point for the environment variable check CLI
ABOUTME: Simple wrapper that imports and runs the modular CLI
"""

from env_option.cli import main

if __name__ == "__main__":
    main()
