"""
DirectoryWalker - Recursively enumerates image files below a directory.
"""

import logging
from typing import List, Optional

from .image_classifier import is_image
from .image_record import ImageEntry
from .storage import LocalStorage


class DirectoryWalker:
    """
    Depth-first walk of a directory tree collecting image files.
    """

    def __init__(
        self,
        storage: Optional[LocalStorage] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize walker.

        Args:
            storage: Storage object (LocalStorage or compatible)
            logger: Optional logger instance
        """
        self.storage = storage or LocalStorage()
        self.logger = logger or logging.getLogger(__name__)

    def walk(self, root_path: str, relative_prefix: str = '') -> List[ImageEntry]:
        """
        Collect every image file below root_path.

        Relative paths always use forward slashes so the result can be
        used as URLs.

        Args:
            root_path: Directory to walk
            relative_prefix: Prefix for the relative paths of the entries

        Returns:
            List of ImageEntry in directory enumeration order
        """
        if not self.storage.exists(root_path):
            self.logger.warning(f"Directory not found: {root_path}")
            return []

        try:
            entries = self.storage.list_directory(root_path)
        except OSError as e:
            self.logger.warning(f"Cannot read directory {root_path}: {e}")
            return []

        items: List[ImageEntry] = []
        for entry in entries:
            rel_path = self._join(relative_prefix, entry.name)
            if entry.is_dir:
                items.extend(self.walk(entry.path, rel_path))
            elif is_image(entry.name):
                items.append(ImageEntry(name=entry.name, path=rel_path, size=entry.size))

        return items

    @staticmethod
    def _join(prefix: str, name: str) -> str:
        prefix = prefix.replace('\\', '/').rstrip('/')
        if not prefix:
            return name
        return f"{prefix}/{name}"
