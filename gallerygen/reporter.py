"""
Reporter - Generates human-readable reports from manifest data.
"""

import logging
import sys
from typing import Optional, TextIO

from .client import Resolution
from .manifest import Manifest
from .name_normalizer import CATEGORIES
from .session import DEFAULT_LANGUAGE


class Reporter:
    """
    Generates human-readable reports from manifest and resolution data.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize reporter.

        Args:
            output: Output stream (default: stdout)
            logger: Optional logger instance
        """
        self.output = output or sys.stdout
        self.logger = logger or logging.getLogger(__name__)

    def _print(self, text: str = "") -> None:
        """Print to output stream."""
        print(text, file=self.output)

    def _format_bytes(self, bytes_val: float) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB']:
            if bytes_val < 1024:
                return f"{bytes_val:.1f} {unit}"
            bytes_val /= 1024
        return f"{bytes_val:.1f} TB"

    def _format_age(self, hours: float) -> str:
        """Format an age in hours as human-readable string."""
        if hours < 1:
            return f"{hours * 60:.0f} minutes"
        elif hours < 48:
            return f"{hours:.1f} hours"
        else:
            return f"{hours / 24:.1f} days"

    def report_summary(self, manifest: Manifest) -> None:
        """Generate a summary report."""
        stats = manifest.stats

        self._print("=" * 70)
        self._print("GALLERY MANIFEST SUMMARY")
        self._print("=" * 70)
        self._print()

        self._print("Manifest Information:")
        self._print(f"  Version:     {manifest.version}")
        self._print(f"  Generated:   {manifest.generated_at}")
        self._print(f"  Age:         {self._format_age(manifest.age_hours)}")
        self._print()

        self._print("Totals:")
        self._print(f"  Projects:          {stats.total_projects:>8,}")
        self._print(f"  Project Images:    {stats.total_images:>8,}")
        self._print(f"  Hero Images:       {stats.total_hero_images:>8,}")
        self._print(f"  Images / Project:  {stats.average_images_per_project:>8.1f}")
        self._print()

        counts = manifest.category_counts()
        self._print("By Category:")
        for category in CATEGORIES:
            self._print(f"  {category:<17}  {counts.get(category, 0):>8,}")
        self._print()

        problems = manifest.check_consistency()
        if problems:
            self._print("⚠️  WARNING: Manifest stats do not match its contents:")
            for problem in problems:
                self._print(f"   - {problem}")
            self._print("   Regenerate the manifest.")
            self._print()

        if stats.total_projects == 0:
            self._print("⚠️  WARNING: No projects in manifest!")
            self._print("   Add project folders with images to the Gallery directory.")
            self._print()

        if stats.total_hero_images == 0:
            self._print("⚠️  WARNING: No hero images in manifest!")
            self._print("   Add JPG/PNG images to the images directory.")
            self._print()

        if manifest.is_stale():
            self._print("⚠️  WARNING: Manifest is more than 30 days old.")
            self._print("   Consider regenerating it if photos have changed.")
            self._print()

    def report_detailed(self, manifest: Manifest) -> None:
        """Generate a detailed report listing every project and hero image."""
        self.report_summary(manifest)

        self._print("-" * 70)
        self._print("PROJECTS")
        self._print("-" * 70)
        for project in manifest.projects:
            self._print()
            self._print(f"  [{project.id}] {project.name_en}")
            self._print(f"      Arabic:    {project.name}")
            self._print(f"      Folder:    {project.folder}")
            self._print(f"      Category:  {project.category}")
            self._print(f"      Thumbnail: {project.thumb}")
            self._print(
                f"      Images:    {project.image_count} "
                f"({self._format_bytes(project.total_bytes)})"
            )
        self._print()

        self._print("-" * 70)
        self._print("HERO IMAGES")
        self._print("-" * 70)
        for image in manifest.hero_images:
            self._print(f"  {image.path:<50} {self._format_bytes(image.size):>12}")
        self._print()

    def report_resolution(self, resolution: Resolution, lang: str = DEFAULT_LANGUAGE) -> None:
        """Report the outcome of a client-side resolution."""
        self._print("=" * 70)
        self._print("PROJECT RESOLUTION")
        self._print("=" * 70)
        self._print()

        tried = ' -> '.join(source.value for source in resolution.attempts)
        self._print(f"  State:       {resolution.state.value}")
        self._print(f"  Source:      {resolution.source.value}")
        self._print(f"  Tried:       {tried or 'nothing'}")
        if resolution.error:
            self._print(f"  Error:       {resolution.error}")
        self._print()

        if not resolution.projects:
            if lang == 'en':
                self._print("  No projects available")
            else:
                self._print("  لا توجد مشاريع متاحة")
        for project in resolution.projects:
            self._print(
                f"  [{project.id:>3}] {project.display_name(lang)} "
                f"({project.category}, {project.image_count} images)"
            )
        self._print()

        if resolution.hero_images:
            self._print(f"  Hero images: {len(resolution.hero_images)}")
            for image in resolution.hero_images:
                self._print(f"    {image.path}")
            self._print()
