from __future__ import annotations

import sys
from pathlib import Path


def _ensure_repo_root_on_path() -> None:
    """Put the repository root (parent of this package) on ``sys.path``.

    Needed when this file is run directly (``python mentalitty/__main__.py``)
    rather than as ``python -m mentalitty``.
    """
    pkg_dir = Path(__file__).resolve().parent
    repo_root_str = str(pkg_dir.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


try:
    # python -m mentalitty
    from .app import run  # type: ignore[attr-defined]
except ImportError:
    # Run as a plain script.
    _ensure_repo_root_on_path()
    from mentalitty.app import run  # type: ignore[attr-defined]


def main() -> int:
    """Run the game; returns the process exit code (0 on a clean quit)."""
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
