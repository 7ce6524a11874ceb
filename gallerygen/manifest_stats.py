"""
ManifestStats - Summary counts stored alongside the manifest.
"""

from dataclasses import dataclass


@dataclass
class ManifestStats:
    """
    Summary counts for a manifest.

    Attributes:
        total_projects: Number of projects
        total_images: Sum of the image counts of all projects
        total_hero_images: Number of hero images
    """
    total_projects: int = 0
    total_images: int = 0
    total_hero_images: int = 0

    @property
    def average_images_per_project(self) -> float:
        if self.total_projects == 0:
            return 0.0
        return self.total_images / self.total_projects

    def to_dict(self) -> dict:
        """Convert to the manifest wire format."""
        return {
            'totalProjects': self.total_projects,
            'totalImages': self.total_images,
            'totalHeroImages': self.total_hero_images,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ManifestStats':
        return cls(
            total_projects=data.get('totalProjects', 0),
            total_images=data.get('totalImages', 0),
            total_hero_images=data.get('totalHeroImages', 0),
        )
