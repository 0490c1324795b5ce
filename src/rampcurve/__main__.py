"""Run the curve tool with ``python -m rampcurve``."""

from .main import main

if __name__ == "__main__":
    raise SystemExit(main())
