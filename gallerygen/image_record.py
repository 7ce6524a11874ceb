"""
Records for gallery images, hero images and projects.
"""

from dataclasses import dataclass, field, asdict
from typing import List


@dataclass(frozen=True)
class ImageEntry:
    """
    A single image file found in a project folder.

    Attributes:
        name: Base filename
        path: Forward-slash path relative to the site root
        size: Size in bytes
    """
    name: str
    path: str
    size: int

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'ImageEntry':
        return cls(
            name=data['name'],
            path=data['path'],
            size=data.get('size', 0),
        )

    def with_prefix(self, prefix: str) -> 'ImageEntry':
        """Return a copy whose path is rooted under prefix."""
        if not prefix:
            return self
        return ImageEntry(
            name=self.name,
            path=f"{prefix.rstrip('/')}/{self.path}",
            size=self.size,
        )


@dataclass(frozen=True)
class HeroImage:
    """
    A standalone banner image from the flat images directory.

    Attributes:
        name: Base filename
        path: Forward-slash path relative to the site root (images/<name>)
        size: Size in bytes
    """
    name: str
    path: str
    size: int

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'HeroImage':
        return cls(
            name=data['name'],
            path=data['path'],
            size=data.get('size', 0),
        )


@dataclass(frozen=True)
class Project:
    """
    One gallery entry, built from one top-level project folder.

    Attributes:
        id: 1-based identifier
        folder: Raw folder name
        name: Arabic display name
        name_en: English display name
        thumb: Path of the thumbnail image
        images: Images of the project, thumbnail excluded
        category: commercial, restoration or residential
    """
    id: int
    folder: str
    name: str
    name_en: str
    thumb: str
    category: str
    images: List[ImageEntry] = field(default_factory=list)

    @property
    def image_count(self) -> int:
        """Number of images, not counting the thumbnail."""
        return len(self.images)

    @property
    def total_bytes(self) -> int:
        return sum(image.size for image in self.images)

    def display_name(self, lang: str) -> str:
        """Name in the requested language ('ar' or 'en')."""
        return self.name_en if lang == 'en' else self.name

    def to_dict(self) -> dict:
        """Convert to the manifest wire format."""
        return {
            'id': self.id,
            'folder': self.folder,
            'name': self.name,
            'nameEn': self.name_en,
            'thumb': self.thumb,
            'images': [image.to_dict() for image in self.images],
            'imageCount': self.image_count,
            'category': self.category,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Project':
        """Create from the manifest wire format."""
        return cls(
            id=data['id'],
            folder=data['folder'],
            name=data['name'],
            name_en=data['nameEn'],
            thumb=data['thumb'],
            category=data.get('category', 'residential'),
            images=[ImageEntry.from_dict(image) for image in data.get('images', [])],
        )
