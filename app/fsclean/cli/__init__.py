"""CLI package for fsclean.

This package contains the Typer application and argument handling.
"""

from fsclean.cli.main import app

__all__ = ["app"]
