"""
YDC SDK Command-Line Interface
==============================

This package provides the command-line tool for the YDC SDK:

- **ydcc**: YDC to C translator and build driver

The tool is implemented as a Click-based CLI application with
help text and consistent exit codes.
"""

__all__ = ["ydcc"]
