"""
ScannerProgress - Prints the human-readable scan report.
"""

import logging
import sys
from typing import Optional, TextIO

from .image_record import HeroImage, Project


class ScannerProgress:
    """
    Receives callbacks from the collectors and prints a scan report.

    With show_files, every hero image decision is printed as well.
    """

    def __init__(
        self,
        show_files: bool = True,
        output: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize progress tracker.

        Args:
            show_files: If True, print each hero image decision
            output: Output stream (default: stdout)
            logger: Optional logger instance
        """
        self.show_files = show_files
        self.output = output or sys.stdout
        self.logger = logger or logging.getLogger(__name__)
        self.projects_found = 0
        self.folders_skipped = 0
        self.hero_images_found = 0
        self.hero_files_skipped = 0

    def _print(self, text: str = "") -> None:
        print(text, file=self.output)

    def on_directory_created(self, path: str) -> None:
        self._print(f"Directory not found, created: {path}")

    def on_project_start(self, folder: str) -> None:
        self._print(f"Scanning project: {folder}")

    def on_project_scanned(self, project: Project) -> None:
        self.projects_found += 1
        self._print(
            f"  ✓ Found {project.image_count} images "
            f"(+ thumbnail) [{project.category}]"
        )

    def on_folder_skipped(self, folder: str) -> None:
        self.folders_skipped += 1
        self._print(f"  ✗ No images found in {folder}")

    def on_hero_start(self, path: str, total_entries: int) -> None:
        self._print()
        self._print(f"Scanning hero images in {path}")
        self._print(f"Found {total_entries} total entries")

    def on_hero_image(self, image: HeroImage) -> None:
        self.hero_images_found += 1
        if self.show_files:
            self._print(f"  ✓ {image.name} ({image.size / 1024:.1f} KB)")

    def on_hero_skipped(self, name: str, reason: str) -> None:
        self.hero_files_skipped += 1
        if self.show_files:
            self._print(f"  - Skipping {reason}: {name}")

    def on_scan_complete(self, total_projects: int, total_hero_images: int) -> None:
        self._print()
        self._print(f"Projects found: {total_projects} ({self.folders_skipped} folders skipped)")
        self._print(f"Hero images found: {total_hero_images}")
        if total_hero_images == 0:
            self._print("WARNING: No hero images found. Add JPG/PNG files to the images folder.")
