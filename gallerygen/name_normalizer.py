"""
NameNormalizer - Bilingual display names and categories from folder names.

Project folders are named by the site owners, usually as
"English Name-الاسم العربي". Names may arrive percent-encoded when they
come from a directory listing.
"""

import logging
import re
from dataclasses import dataclass
from urllib.parse import unquote

logger = logging.getLogger(__name__)

ARABIC_PATTERN = re.compile(r'[\u0600-\u06FF]')
WHITESPACE_PATTERN = re.compile(r'\s+')
MALFORMED_ESCAPE_PATTERN = re.compile(r'%(?![0-9A-Fa-f]{2})')

ARABIC_PROJECT_PREFIX = 'مشروع'
ENGLISH_PROJECT_PREFIX = 'Project'

COMMERCIAL = 'commercial'
RESTORATION = 'restoration'
RESIDENTIAL = 'residential'

CATEGORIES = (COMMERCIAL, RESTORATION, RESIDENTIAL)

# Checked in order, first match wins
CATEGORY_KEYWORDS = (
    (COMMERCIAL, ('commercial', 'shop', 'mall', 'compound', 'complex')),
    (RESTORATION, ('restoration', 'renovation', 'repair')),
)


@dataclass(frozen=True)
class ProjectName:
    """
    Display names for a project.

    Attributes:
        ar: Arabic display name
        en: English display name
    """
    ar: str
    en: str


def has_arabic(text: str) -> bool:
    """True if the text contains at least one Arabic-script character."""
    return ARABIC_PATTERN.search(text) is not None


def decode_folder_name(folder_name: str) -> str:
    """
    Percent-decode a folder name.

    Malformed escapes (including sequences that are not valid UTF-8)
    leave the raw name untouched.
    """
    if MALFORMED_ESCAPE_PATTERN.search(folder_name):
        logger.debug(f"Malformed escape in folder name: {folder_name}")
        return folder_name
    try:
        return unquote(folder_name, errors='strict')
    except UnicodeDecodeError:
        logger.debug(f"Could not decode folder name: {folder_name}")
        return folder_name


def clean_folder_name(folder_name: str) -> str:
    """Decode and tidy whitespace in a folder name."""
    name = decode_folder_name(folder_name)
    name = name.replace('%20', ' ')
    name = WHITESPACE_PATTERN.sub(' ', name)
    return name.strip()


def normalize(folder_name: str) -> ProjectName:
    """
    Derive Arabic and English display names from a folder name.

    "Villa Compound-فيلا كومباوند" -> ar="فيلا كومباوند", en="Villa Compound".
    Only the first hyphen splits the name. Names without an English/Arabic
    pair get a generic "Project"/"مشروع" prefix in the missing language.

    Args:
        folder_name: Raw folder name, possibly percent-encoded

    Returns:
        ProjectName with both display names
    """
    clean_name = clean_folder_name(folder_name)

    hyphen_index = clean_name.find('-')
    if hyphen_index > 0:
        english_part = clean_name[:hyphen_index].strip()
        arabic_part = clean_name[hyphen_index + 1:].strip()
        if english_part and arabic_part and has_arabic(arabic_part):
            return ProjectName(ar=arabic_part, en=english_part)

    if has_arabic(clean_name):
        return ProjectName(ar=clean_name, en=f"{ENGLISH_PROJECT_PREFIX} {clean_name}")

    return ProjectName(ar=f"{ARABIC_PROJECT_PREFIX} {clean_name}", en=clean_name)


def detect_category(folder_name: str) -> str:
    """Guess a project category from keywords in the raw folder name."""
    name = folder_name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return RESIDENTIAL
