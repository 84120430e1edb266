"""Entry point for `python -m svcinstall`."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
