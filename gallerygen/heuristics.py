"""
HeuristicGuesser - Last-resort discovery by probing conventional names.

Used when neither the manifest nor a directory listing is available. A
resource counts as present only if it downloads within the probe timeout
and Pillow recognises it as an image.
"""

import io
import logging
from typing import List, Optional, Sequence
from urllib.parse import quote, urljoin

from PIL import Image, UnidentifiedImageError

from .http_client import FetchError, HttpClient
from .image_classifier import THUMBNAIL_NAME
from .image_record import HeroImage, ImageEntry, Project
from .name_normalizer import detect_category, normalize

DEFAULT_PROJECT_FOLDERS = (
    'job1', 'job2', 'job3', 'job4', 'job5',
    'project1', 'project2', 'project3', 'project4', 'project5',
    'work1', 'work2', 'work3', 'work4', 'work5',
)

DEFAULT_HERO_NAMES = (
    'hero1.jpg', 'hero2.jpg', 'hero3.jpg',
    'slide1.jpg', 'slide2.jpg', 'slide3.jpg',
    'background1.jpg', 'background2.jpg',
    'banner1.jpg', 'banner2.jpg',
)

# Tried in order when none of the hero names exist; first hit wins
DEFAULT_HERO_FALLBACKS = ('image1.jpg', 'image1.jpeg', 'image1.png', 'image1.webp')

# Numbered images probed inside a guessed project folder: 1.jpg, 2.jpg, ...
MAX_NUMBERED_IMAGES = 20


class HeuristicGuesser:
    """
    Guesses projects and hero images from a fixed list of names.
    """

    def __init__(
        self,
        http: HttpClient,
        site_url: str,
        gallery_dir: str = 'Gallery',
        images_dir: str = 'images',
        probe_timeout: float = 2.0,
        project_folders: Sequence[str] = DEFAULT_PROJECT_FOLDERS,
        hero_names: Sequence[str] = DEFAULT_HERO_NAMES,
        hero_fallbacks: Sequence[str] = DEFAULT_HERO_FALLBACKS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize guesser.

        Args:
            http: HTTP client
            site_url: Site root URL ending with '/'
            gallery_dir: Gallery directory relative to the site root
            images_dir: Hero images directory relative to the site root
            probe_timeout: Seconds before a probe counts as not found
            project_folders: Folder names to try
            hero_names: Hero image names to try
            hero_fallbacks: Names tried only if no hero name exists
            logger: Optional logger instance
        """
        self.http = http
        self.site_url = site_url
        self.gallery_dir = gallery_dir.strip('/')
        self.images_dir = images_dir.strip('/')
        self.probe_timeout = probe_timeout
        self.project_folders = list(project_folders)
        self.hero_names = list(hero_names)
        self.hero_fallbacks = list(hero_fallbacks)
        self.logger = logger or logging.getLogger(__name__)
        self.probes_made = 0

    def image_exists(self, path: str) -> bool:
        """
        Probe a site-relative image path.

        Errors, timeouts and payloads Pillow cannot identify all count as
        not found.
        """
        url = urljoin(self.site_url, quote(path))
        self.probes_made += 1
        try:
            data = self.http.fetch(url, timeout=self.probe_timeout)
        except FetchError as e:
            self.logger.debug(f"Probe miss: {path} ({e})")
            return False

        try:
            with Image.open(io.BytesIO(data)) as img:
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            self.logger.debug(f"Probe for {path} returned a non-image: {e}")
            return False
        return True

    def guess_projects(self) -> List[Project]:
        """
        Probe each conventional folder for a thumbnail and numbered images.

        Returns:
            Projects for folders with at least one image, ids in order found
        """
        projects: List[Project] = []
        for folder in self.project_folders:
            project = self._guess_folder(folder, len(projects) + 1)
            if project:
                self.logger.info(f"Guessed project folder: {folder}")
                projects.append(project)
        return projects

    def _guess_folder(self, folder: str, project_id: int) -> Optional[Project]:
        base = f"{self.gallery_dir}/{folder}"

        thumb: Optional[str] = None
        thumb_path = f"{base}/{THUMBNAIL_NAME}"
        if self.image_exists(thumb_path):
            thumb = thumb_path

        images: List[ImageEntry] = []
        for number in range(1, MAX_NUMBERED_IMAGES + 1):
            name = f"{number}.jpg"
            path = f"{base}/{name}"
            if not self.image_exists(path):
                break
            images.append(ImageEntry(name=name, path=path, size=0))

        if thumb is None:
            if not images:
                return None
            thumb = images.pop(0).path

        names = normalize(folder)
        return Project(
            id=project_id,
            folder=folder,
            name=names.ar,
            name_en=names.en,
            thumb=thumb,
            category=detect_category(folder),
            images=images,
        )

    def guess_hero_images(self) -> List[HeroImage]:
        """Probe the conventional hero image names."""
        found = [
            self._hero(name) for name in self.hero_names
            if self.image_exists(f"{self.images_dir}/{name}")
        ]
        if found:
            return found

        for name in self.hero_fallbacks:
            if self.image_exists(f"{self.images_dir}/{name}"):
                return [self._hero(name)]
        return []

    def _hero(self, name: str) -> HeroImage:
        return HeroImage(name=name, path=f"{self.images_dir}/{name}", size=0)
