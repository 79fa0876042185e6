"""Simple logging helpers for the scaffolder CLI and server.

Everything goes through ``print`` so the output reads like a terminal
session. The MCP server talks JSON-RPC over stdout, so it calls
``use_stderr()`` before serving and every helper follows.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


_use_stderr = False


def use_stderr(enabled: bool = True) -> None:
    """Route all helper output to stderr (required for stdio transports)."""
    global _use_stderr  # noqa: PLW0603
    _use_stderr = enabled


def _stream() -> TextIO:
    return sys.stderr if _use_stderr else sys.stdout


def _paint(color: str, msg: str) -> str:
    if os.environ.get("NO_COLOR"):
        return msg
    return f"{color}{msg}{Colors.ENDC}"


def print_header(msg: str) -> None:
    """Print a header message."""
    print(_paint(Colors.HEADER + Colors.BOLD, msg), file=_stream())


def print_info(msg: str) -> None:
    """Print an info message."""
    print(_paint(Colors.OKCYAN, msg), file=_stream())


def print_success(msg: str) -> None:
    """Print a success message."""
    print(_paint(Colors.OKGREEN, f"✓ {msg}"), file=_stream())


def print_skip(msg: str) -> None:
    """Print a message for an entry left untouched."""
    print(_paint(Colors.DIM, f"⊘ {msg}"), file=_stream())


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(_paint(Colors.WARNING, f"⚠️  {msg}"), file=_stream())


def print_error(msg: str) -> None:
    """Print an error message."""
    print(_paint(Colors.FAIL, f"❌ {msg}"), file=_stream())
