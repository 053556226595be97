"""Entry point for running with python -m mdsplit."""

from mdsplit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
