"""CLI for slugger."""

from slugger.cli.main import cli

__all__ = ["cli"]
