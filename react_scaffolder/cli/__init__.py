"""
CLI module for the React architecture scaffolder.

This module provides the command-line interface, including the main entry
point that is installed as the ``react-scaffold`` console script.
"""

from .commands import main

__all__ = ["main"]
