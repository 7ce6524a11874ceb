"""
Manifest - The generated description of all projects and hero images.
"""

import json
import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .image_record import HeroImage, Project
from .manifest_stats import ManifestStats

logger = logging.getLogger(__name__)

MANIFEST_VERSION = '1.0'


class ManifestFormatError(ValueError):
    """Raised when manifest data cannot be parsed."""


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 generatedAt value; naive times are taken as UTC.

    Raises:
        ValueError: If the value is not an ISO-8601 string
    """
    if not isinstance(value, str):
        raise ValueError(f"generatedAt must be a string, got {value!r}")
    created = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created


def _file_mode(path: Path) -> int:
    """Mode for a new manifest: that of the file it replaces, else 0666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


@dataclass
class Manifest:
    """
    Complete site manifest.

    Attributes:
        version: Format version
        generated_at: ISO-8601 timestamp of generation
        projects: Projects in gallery order
        hero_images: Hero images in directory order
        recorded_stats: Stats as read from a file (None when built in memory)
    """
    generated_at: str
    version: str = MANIFEST_VERSION
    projects: List[Project] = field(default_factory=list)
    hero_images: List[HeroImage] = field(default_factory=list)
    recorded_stats: Optional[ManifestStats] = None

    AGE_WARNING_HOURS = 24 * 30

    @property
    def stats(self) -> ManifestStats:
        """Stats computed from the collections."""
        return ManifestStats(
            total_projects=len(self.projects),
            total_images=sum(p.image_count for p in self.projects),
            total_hero_images=len(self.hero_images),
        )

    @property
    def is_empty(self) -> bool:
        return not self.projects

    def get_project(self, folder: str) -> Optional[Project]:
        """Find a project by its raw folder name."""
        for project in self.projects:
            if project.folder == folder:
                return project
        return None

    def get_projects_for_category(self, category: str) -> Iterator[Project]:
        """Yield projects of one category."""
        for project in self.projects:
            if project.category == category:
                yield project

    def category_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for project in self.projects:
            counts[project.category] = counts.get(project.category, 0) + 1
        return counts

    def check_consistency(self) -> List[str]:
        """
        Compare the recorded stats of a loaded manifest with its contents.

        Returns:
            List of problems found (empty if consistent)
        """
        problems = []
        computed = self.stats
        recorded = self.recorded_stats
        if recorded is not None:
            if recorded.total_projects != computed.total_projects:
                problems.append(
                    f"totalProjects is {recorded.total_projects}, "
                    f"manifest lists {computed.total_projects} projects"
                )
            if recorded.total_images != computed.total_images:
                problems.append(
                    f"totalImages is {recorded.total_images}, "
                    f"projects hold {computed.total_images} images"
                )
            if recorded.total_hero_images != computed.total_hero_images:
                problems.append(
                    f"totalHeroImages is {recorded.total_hero_images}, "
                    f"manifest lists {computed.total_hero_images} hero images"
                )

        seen_ids = set()
        for project in self.projects:
            if project.id in seen_ids:
                problems.append(f"Duplicate project id {project.id} ({project.folder})")
            seen_ids.add(project.id)

        return problems

    @property
    def age_hours(self) -> float:
        """Age of manifest in hours."""
        created = parse_timestamp(self.generated_at)
        now = datetime.now(timezone.utc)
        return (now - created).total_seconds() / 3600

    def is_stale(self, threshold_hours: Optional[float] = None) -> bool:
        """Check if manifest is older than threshold."""
        threshold = self.AGE_WARNING_HOURS if threshold_hours is None else threshold_hours
        return self.age_hours > threshold

    def to_dict(self) -> dict:
        """Convert to the manifest wire format."""
        return {
            'version': self.version,
            'generatedAt': self.generated_at,
            'projects': [p.to_dict() for p in self.projects],
            'heroImages': [h.to_dict() for h in self.hero_images],
            'stats': self.stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Manifest':
        """
        Create from the manifest wire format.

        Raises:
            ManifestFormatError: If required fields are missing or malformed
        """
        if not isinstance(data, dict):
            raise ManifestFormatError("Manifest must be a JSON object")

        try:
            projects = [Project.from_dict(p) for p in data.get('projects', [])]
            hero_images = [HeroImage.from_dict(h) for h in data.get('heroImages', [])]
            stats = data.get('stats')
            generated_at = data['generatedAt']
            parse_timestamp(generated_at)
            return cls(
                generated_at=generated_at,
                version=data.get('version', MANIFEST_VERSION),
                projects=projects,
                hero_images=hero_images,
                recorded_stats=ManifestStats.from_dict(stats) if stats else None,
            )
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise ManifestFormatError(f"Invalid manifest: {e!r}") from e

    @classmethod
    def from_json(cls, text: str) -> 'Manifest':
        """Parse manifest JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestFormatError(f"Manifest is not valid JSON: {e}") from e
        return cls.from_dict(data)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    def save(self, filepath: str) -> None:
        """
        Save manifest to a JSON file.

        The file is written next to the target and renamed over it, so
        readers see either the old or the new manifest, never a partial one.
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix='.tmp', dir=str(path.parent)
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(self.to_json())
                f.write('\n')
            # mkstemp creates 0600; the manifest is served to browsers
            os.chmod(tmp_path, _file_mode(path))
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        size_kb = path.stat().st_size / 1024
        logger.info(f"Manifest saved: {filepath} ({size_kb:.1f} KB)")

    @classmethod
    def load(cls, filepath: str) -> 'Manifest':
        """Load manifest from JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            return cls.from_json(f.read())

    @classmethod
    def create_new(cls) -> 'Manifest':
        """Create a new empty manifest stamped with the current time."""
        return cls(generated_at=datetime.now(timezone.utc).isoformat())
