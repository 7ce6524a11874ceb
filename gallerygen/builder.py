"""
ManifestBuilder - Scans the site directories and writes manifest.json.
"""

import logging
import time
from typing import Optional

from .manifest import Manifest
from .scanner import HeroImageCollector, ProjectCollector
from .scanner_progress import ScannerProgress
from .storage import LocalStorage


class ManifestBuilder:
    """
    Builds a Manifest from the gallery and images directories.

    The manifest is always regenerated as a whole.
    """

    def __init__(
        self,
        storage: Optional[LocalStorage] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize builder.

        Args:
            storage: Storage object (LocalStorage or compatible)
            logger: Optional logger instance
        """
        self.storage = storage or LocalStorage()
        self.logger = logger or logging.getLogger(__name__)
        self.project_collector = ProjectCollector(self.storage, self.logger)
        self.hero_collector = HeroImageCollector(self.storage, self.logger)

    def build(
        self,
        gallery_root: str = './Gallery',
        images_root: str = './images',
        progress: Optional[ScannerProgress] = None
    ) -> Manifest:
        """
        Scan both directories and assemble a manifest.

        Missing directories are created and yield empty collections.

        Args:
            gallery_root: Directory with one folder per project
            images_root: Flat directory of hero images
            progress: Optional progress tracker for callbacks

        Returns:
            New Manifest
        """
        start_time = time.time()
        manifest = Manifest.create_new()

        self.logger.info(f"Scanning gallery projects in {gallery_root}")
        manifest.projects = self.project_collector.collect(gallery_root, progress)

        self.logger.info(f"Scanning hero images in {images_root}")
        manifest.hero_images = self.hero_collector.collect(images_root, progress)

        stats = manifest.stats
        if progress:
            progress.on_scan_complete(stats.total_projects, stats.total_hero_images)

        self.logger.info(
            f"Scan complete: {stats.total_projects} projects, "
            f"{stats.total_images} project images, "
            f"{stats.total_hero_images} hero images "
            f"({time.time() - start_time:.1f}s)"
        )

        return manifest

    def persist(self, manifest: Manifest, path: str = './manifest.json') -> None:
        """Write the manifest to path, replacing any previous file."""
        manifest.save(path)
