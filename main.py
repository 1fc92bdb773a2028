#!/usr/bin/env python3
"""RedFlash — entry point.

Run with:
    python main.py
    python -m redflash
"""

from redflash.__main__ import main


if __name__ == "__main__":
    main()
