"""
Scanner - Collects projects and hero images from the site directories.
"""

import logging
import os
from typing import List, Optional

from .image_classifier import hero_exclusion_reason, is_image, is_thumbnail
from .image_record import HeroImage, ImageEntry, Project
from .name_normalizer import detect_category, normalize
from .scanner_progress import ScannerProgress
from .storage import LocalStorage
from .walker import DirectoryWalker


def url_prefix_for(root_path: str) -> str:
    """Site-relative prefix for a root directory ('./Gallery' -> 'Gallery')."""
    return os.path.basename(os.path.normpath(root_path))


def select_thumbnail(entries: List[ImageEntry]) -> Optional[ImageEntry]:
    """
    Pick the thumbnail of a project.

    The first entry named thumb.jpg wins, otherwise the first entry.
    """
    for entry in entries:
        if is_thumbnail(entry.name):
            return entry
    return entries[0] if entries else None


class ProjectCollector:
    """
    Builds one Project per top-level folder of the gallery directory.
    """

    def __init__(
        self,
        storage: Optional[LocalStorage] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize collector.

        Args:
            storage: Storage object (LocalStorage or compatible)
            logger: Optional logger instance
        """
        self.storage = storage or LocalStorage()
        self.logger = logger or logging.getLogger(__name__)
        self.walker = DirectoryWalker(self.storage, self.logger)

    def collect(
        self,
        gallery_root: str,
        progress: Optional[ScannerProgress] = None,
        url_prefix: Optional[str] = None
    ) -> List[Project]:
        """
        Scan the gallery directory for projects.

        Project ids follow the position of the folder in the directory
        listing, so skipped folders leave a gap.

        Args:
            gallery_root: Directory containing one folder per project
            progress: Optional progress tracker for callbacks
            url_prefix: Prefix for image paths (default: name of gallery_root)

        Returns:
            List of projects in directory enumeration order
        """
        if url_prefix is None:
            url_prefix = url_prefix_for(gallery_root)

        if not self.storage.exists(gallery_root):
            self.logger.warning(f"Gallery directory not found: {gallery_root}, creating it")
            self.storage.make_dirs(gallery_root)
            if progress:
                progress.on_directory_created(gallery_root)
            return []

        try:
            gallery_entries = self.storage.list_directory(gallery_root)
        except OSError as e:
            self.logger.warning(f"Cannot read gallery directory {gallery_root}: {e}")
            return []

        projects: List[Project] = []
        for index, entry in enumerate(gallery_entries):
            if not entry.is_dir:
                continue

            if progress:
                progress.on_project_start(entry.name)
            else:
                self.logger.info(f"Scanning project: {entry.name}")

            project = self._scan_folder(entry.path, entry.name, index + 1, url_prefix)
            if project is None:
                self.logger.info(f"  No images found in {entry.name}, skipping")
                if progress:
                    progress.on_folder_skipped(entry.name)
                continue

            projects.append(project)
            if progress:
                progress.on_project_scanned(project)
            else:
                self.logger.info(f"  Found {project.image_count} images")

        return projects

    def _scan_folder(
        self,
        folder_path: str,
        folder: str,
        project_id: int,
        url_prefix: str
    ) -> Optional[Project]:
        """Build a Project from a single folder, or None if it has no images."""
        entries = self.walker.walk(folder_path, folder)
        thumb = select_thumbnail(entries)
        if thumb is None:
            return None

        images = [
            entry.with_prefix(url_prefix)
            for entry in entries
            if entry is not thumb
        ]
        names = normalize(folder)

        return Project(
            id=project_id,
            folder=folder,
            name=names.ar,
            name_en=names.en,
            thumb=thumb.with_prefix(url_prefix).path,
            category=detect_category(folder),
            images=images,
        )


class HeroImageCollector:
    """
    Collects banner images from the flat images directory.

    Unlike ProjectCollector this does not descend into subdirectories.
    """

    def __init__(
        self,
        storage: Optional[LocalStorage] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.storage = storage or LocalStorage()
        self.logger = logger or logging.getLogger(__name__)

    def collect(
        self,
        images_root: str,
        progress: Optional[ScannerProgress] = None,
        url_prefix: Optional[str] = None
    ) -> List[HeroImage]:
        """
        Scan the images directory for hero images.

        Args:
            images_root: Flat directory of banner images
            progress: Optional progress tracker for callbacks
            url_prefix: Prefix for image paths (default: name of images_root)

        Returns:
            List of hero images in directory enumeration order
        """
        if url_prefix is None:
            url_prefix = url_prefix_for(images_root)

        if not self.storage.exists(images_root):
            self.logger.warning(f"Images directory not found: {images_root}, creating it")
            self.storage.make_dirs(images_root)
            if progress:
                progress.on_directory_created(images_root)
            return []

        try:
            entries = self.storage.list_directory(images_root)
        except OSError as e:
            self.logger.warning(f"Cannot read images directory {images_root}: {e}")
            return []

        if progress:
            progress.on_hero_start(images_root, len(entries))

        hero_images: List[HeroImage] = []
        for entry in entries:
            if entry.is_dir:
                self._skip(entry.name, 'directory', progress)
                continue

            if not is_image(entry.name):
                self._skip(entry.name, 'non-image', progress)
                continue

            reason = hero_exclusion_reason(entry.name)
            if reason:
                self._skip(entry.name, reason, progress)
                continue

            image = HeroImage(
                name=entry.name,
                path=f"{url_prefix}/{entry.name}" if url_prefix else entry.name,
                size=entry.size,
            )
            hero_images.append(image)
            if progress:
                progress.on_hero_image(image)

        if not hero_images:
            self.logger.warning(f"No hero images found in {images_root}")

        return hero_images

    def _skip(self, name: str, reason: str, progress: Optional[ScannerProgress]) -> None:
        self.logger.debug(f"Skipping {reason}: {name}")
        if progress:
            progress.on_hero_skipped(name, reason)
