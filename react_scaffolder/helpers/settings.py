"""Runtime settings for the CLI and the MCP server.

The only setting is the authorized base directory that every scaffold
target must stay inside. The core never reads the environment; callers
resolve the base here and pass it down explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR_ENV_VAR = "REACT_SCAFFOLDER_BASE_DIR"


def resolve_base_dir(explicit: str | Path | None = None) -> Path:
    """Return the absolute base directory for scaffold targets.

    Resolution order:
        1. ``explicit`` (the ``--base-dir`` option)
        2. ``$REACT_SCAFFOLDER_BASE_DIR``
        3. the current working directory

    Args:
        explicit: Base directory given on the command line, if any.

    Returns:
        Absolute, normalized base directory (not required to exist yet).
    """
    raw = str(explicit).strip() if explicit is not None else ""
    if not raw:
        raw = (os.environ.get(BASE_DIR_ENV_VAR) or "").strip()
    if not raw:
        return Path.cwd()
    return Path(os.path.abspath(os.path.expanduser(raw)))
