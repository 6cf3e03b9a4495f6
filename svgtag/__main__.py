"""CLI entry point for the svgtag package.

Usage:
    python -m svgtag values FillRule
    python -m svgtag render circle --attr cx=50 --attr cy=50 --attr r=40
    python -m svgtag inline logo.svg --title "Company logo"
"""

from .cli import main

if __name__ == "__main__":
    main()
