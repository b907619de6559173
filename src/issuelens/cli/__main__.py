"""Entrypoint for ``python -m issuelens.cli``."""

from issuelens.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
