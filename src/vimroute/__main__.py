"""Run the router as ``python -m vimroute``."""

from __future__ import annotations

from vimroute.cli import main

if __name__ == "__main__":
    main()
