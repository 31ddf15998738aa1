#!/usr/bin/env python3
"""
Entry point for running vram_calculator as a module:
    python -m vram_calculator [args]
"""
from .cli import main

if __name__ == "__main__":
    main()
