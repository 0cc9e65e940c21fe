"""Entry point for the documentation coverage tool.

Configuration and logging are initialized by the CLI group itself.
"""

from doccov.cli.commands import doccov


def main() -> None:
    """Launch the CLI."""
    doccov(prog_name="doccov")


if __name__ == "__main__":
    main()
