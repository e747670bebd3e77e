#!/usr/bin/env python3
"""Convenience GUI entry point.

The GUI implementation lives in `tombstoning.gui.app`.
"""

from tombstoning.gui import main


if __name__ == "__main__":
    main()
