"""Allow running as python -m defhint."""

from defhint.cli.main import cli

if __name__ == "__main__":
    cli()
