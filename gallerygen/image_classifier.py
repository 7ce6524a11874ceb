"""
ImageClassifier - Filename rules for gallery and hero images.
"""

import os
from typing import Optional


IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp', '.gif'}

THUMBNAIL_NAME = 'thumb.jpg'


def is_image(filename: str) -> bool:
    """True if the file extension is one of the displayable image types."""
    ext = os.path.splitext(filename)[1].lower()
    return ext in IMAGE_EXTENSIONS


def is_thumbnail(filename: str) -> bool:
    """True if the file is a project thumbnail marker (exactly thumb.jpg)."""
    return filename.lower() == THUMBNAIL_NAME


def hero_exclusion_reason(filename: str) -> Optional[str]:
    """
    Return why a file is kept out of the hero banner.

    Returns:
        'thumbnail' or 'logo', or None if the file may be used
    """
    lowered = filename.lower()
    if 'thumb' in lowered:
        return 'thumbnail'
    if 'logo' in lowered:
        return 'logo'
    return None


def is_excluded_from_hero(filename: str) -> bool:
    """True if the name contains 'thumb' or 'logo' (case-insensitive)."""
    return hero_exclusion_reason(filename) is not None
