"""Module entrypoint for ``python -m issuelens``."""

from issuelens.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
