"""zodiac-mapper command line interface package."""

from __future__ import annotations

from .app import app

__all__ = ["app", "main"]


def main() -> None:
    """Console-script entry point."""

    app(prog_name="zodiac-mapper")
