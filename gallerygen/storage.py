"""
LocalStorage - Filesystem operations used by the scanners.

Scanners only talk to the filesystem through this class so tests can swap
in an in-memory double with the same methods.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One entry of a directory listing.

    Attributes:
        name: Entry name (no path)
        path: Full path usable with the storage object
        is_dir: True for directories
        size: Size in bytes (0 for directories)
    """
    name: str
    path: str
    is_dir: bool
    size: int = 0


class LocalStorage:
    """
    Local filesystem access for the manifest scanners.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def make_dirs(self, path: str) -> None:
        """Create a directory (and parents) if missing."""
        os.makedirs(path, exist_ok=True)

    def list_directory(self, path: str) -> List[DirectoryEntry]:
        """
        List the direct entries of a directory.

        Entries come back in the order the filesystem reports them; no
        sorting is applied.

        Args:
            path: Directory to list

        Returns:
            List of DirectoryEntry (entries that cannot be stat-ed are skipped)
        """
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir()
                    size = 0 if is_dir else entry.stat().st_size
                except OSError as e:
                    self.logger.warning(f"Skipping unreadable entry {entry.path}: {e}")
                    continue
                entries.append(DirectoryEntry(
                    name=entry.name,
                    path=entry.path,
                    is_dir=is_dir,
                    size=size,
                ))
        return entries
