"""Entry point for ``python -m bumpcheck``."""

from bumpcheck.cli.main import cli

if __name__ == "__main__":
    cli()
