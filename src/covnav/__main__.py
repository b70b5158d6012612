"""Entry point for ``python -m covnav``."""

from covnav.cli.main import cli

if __name__ == "__main__":
    cli()
