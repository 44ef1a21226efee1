"""Utility modules for fsclean.

This module exports commonly used utility functions.
"""

from fsclean.utils.formatting import err_console, print_error

__all__ = [
    "err_console",
    "print_error",
]
