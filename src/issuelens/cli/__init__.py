"""Command-line interface for issuelens."""

from issuelens.cli.app import main
from issuelens.cli.parser import build_parser

__all__ = ["build_parser", "main"]
