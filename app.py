#!/usr/bin/env python3
"""
Hugging Face Spaces entry point for the VRAM Calculator
"""
from vram_calculator.app import demo

if __name__ == "__main__":
    demo.launch()
