"""Entry point for the dressing finder Textual app."""

from __future__ import annotations

from dressings.dressing_app import DressingApp
from dressings.index import initialize


def main() -> None:
    """Build the index and run the Textual application."""
    # Dataset errors surface here, before the terminal is taken over.
    DressingApp(index=initialize()).run()


if __name__ == "__main__":
    main()
