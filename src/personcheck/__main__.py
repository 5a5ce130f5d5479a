"""Allow ``python -m personcheck``."""

from personcheck.cli import cli

if __name__ == "__main__":
    cli()
