"""Module entry point for ``python -m slugger``."""

from slugger.cli.main import cli

if __name__ == "__main__":  # pragma: no cover - CLI entry point
    cli()
