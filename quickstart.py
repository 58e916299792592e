#!/usr/bin/env python3
# quickstart.py
"""
Quick start script for webroots development.
"""

import subprocess
import sys


def main():
    print("webroots Quick Start\n")

    # Python 3.11+ is required (see pyproject.toml)
    print(f"Using Python {sys.version}")

    print("Installing webroots in development mode...")
    subprocess.run([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])

    print("Testing installation...")
    subprocess.run([sys.executable, "-m", "webroots.cli", "diagnose"])

    print("\nTry these commands:")
    print("  webroots normalize https://shop.test/index.php/media/a.png")
    print("  webroots to-path http://shop.test/media/a.png --config webroots.yaml")
    print("  webroots to-url /app/pub/media/a.png --config webroots.yaml")
    print("  pytest                          # Run tests")


if __name__ == "__main__":
    main()
