"""Filesystem capability used by the installer.

Every side effect the installer performs goes through a ``FileSystem`` so
tests can swap in a fake that fails on demand.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """The operations the installer needs from a filesystem."""

    def directory_exists(self, path: Path) -> bool: ...

    def ensure_directory(self, path: Path) -> None: ...

    def remove_tree(self, path: Path) -> None: ...

    def copy_tree(self, source: Path, target: Path) -> None: ...

    def rename(self, source: Path, target: Path) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the real disk."""

    def directory_exists(self, path: Path) -> bool:
        return path.is_dir()

    def ensure_directory(self, path: Path) -> None:
        """Create the directory and any missing parents; no-op if present."""
        path.mkdir(parents=True, exist_ok=True)

    def remove_tree(self, path: Path) -> None:
        """Delete a directory tree, or a lone file/symlink at that path."""
        if path.is_symlink() or path.is_file():
            path.unlink()
        else:
            shutil.rmtree(path)

    def copy_tree(self, source: Path, target: Path) -> None:
        """Recursively copy ``source`` to ``target``; ``target`` must not exist."""
        shutil.copytree(source, target)

    def rename(self, source: Path, target: Path) -> None:
        source.rename(target)
