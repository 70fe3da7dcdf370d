"""Entry point for ``python -m pathmaster``."""

from pathmaster.cli import cli

if __name__ == "__main__":
    cli()
