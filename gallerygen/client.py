"""
ManifestClient - Resolves project data for the presentation layer.

Resolution order:
    1. manifest.json
    2. Live scrape of the gallery directory listing
    3. Probing conventional folder and file names
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
from urllib.parse import urljoin

from .config import ClientConfig
from .heuristics import HeuristicGuesser
from .http_client import FetchError, HttpClient
from .image_classifier import is_excluded_from_hero
from .image_record import HeroImage, Project
from .listing import LiveDirectoryResolver
from .manifest import Manifest, ManifestFormatError
from .name_normalizer import decode_folder_name


class ResolutionState(Enum):
    LOADED = 'loaded'
    EMPTY = 'empty'
    ERROR = 'error'


class Source(Enum):
    MANIFEST = 'manifest'
    LISTING = 'listing'
    HEURISTIC = 'heuristic'
    NONE = 'none'


@dataclass
class Resolution:
    """
    Outcome of a resolution run.

    Attributes:
        state: LOADED, EMPTY or ERROR
        source: Strategy that produced the data
        projects: Resolved projects (empty unless LOADED)
        hero_images: Resolved hero images
        attempts: Strategies tried, in order
        error: Message for the ERROR state
    """
    state: ResolutionState
    source: Source = Source.NONE
    projects: List[Project] = field(default_factory=list)
    hero_images: List[HeroImage] = field(default_factory=list)
    attempts: List[Source] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self.state is ResolutionState.LOADED


class ManifestClient:
    """
    Fetches the manifest and falls back to scraping and guessing.

    No failure escapes resolve(): the worst outcome is an EMPTY or ERROR
    Resolution, which the presentation layer shows as "no projects".
    """

    def __init__(
        self,
        config: ClientConfig,
        http: Optional[HttpClient] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize client.

        Args:
            config: Client configuration
            http: HTTP client (default: built from config)
            logger: Optional logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.http = http or HttpClient(
            timeout=config.fetch_timeout,
            verify_ssl=config.verify_ssl,
            logger=self.logger,
        )
        self.live = LiveDirectoryResolver(
            self.http,
            config.site_url,
            gallery_dir=config.gallery_dir,
            timeout=config.fetch_timeout,
            logger=self.logger,
        )
        self.guesser = HeuristicGuesser(
            self.http,
            config.site_url,
            gallery_dir=config.gallery_dir,
            images_dir=config.images_dir,
            probe_timeout=config.probe_timeout,
            logger=self.logger,
        )
        self._manifest: Optional[Manifest] = None
        self._manifest_fetched = False

    @property
    def manifest_url(self) -> str:
        return urljoin(self.config.site_url, self.config.manifest_name)

    def fetch_manifest(self) -> Manifest:
        """
        Fetch and parse the manifest.

        Raises:
            FetchError: If the manifest cannot be fetched
            ManifestFormatError: If the manifest cannot be parsed
        """
        text = self.http.fetch_text(self.manifest_url, self.config.fetch_timeout)
        return Manifest.from_json(text)

    def _cached_manifest(self) -> Optional[Manifest]:
        """Fetch the manifest once per client; None if unavailable."""
        if not self._manifest_fetched:
            self._manifest_fetched = True
            try:
                self._manifest = self.fetch_manifest()
            except (FetchError, ManifestFormatError) as e:
                self.logger.warning(f"Manifest unavailable: {e}")
                self._manifest = None
        return self._manifest

    def resolve(self) -> Resolution:
        """
        Resolve the project list.

        Returns:
            Resolution in state LOADED, EMPTY or ERROR
        """
        attempts: List[Source] = []
        try:
            attempts.append(Source.MANIFEST)
            manifest = self._cached_manifest()
            if manifest is not None:
                if manifest.projects:
                    self.logger.info(f"Loaded {len(manifest.projects)} projects from manifest")
                    return Resolution(
                        state=ResolutionState.LOADED,
                        source=Source.MANIFEST,
                        projects=list(manifest.projects),
                        hero_images=list(manifest.hero_images),
                        attempts=attempts,
                    )
                self.logger.info("Manifest lists no projects")
                return Resolution(
                    state=ResolutionState.EMPTY,
                    source=Source.MANIFEST,
                    hero_images=list(manifest.hero_images),
                    attempts=attempts,
                )

            attempts.append(Source.LISTING)
            projects = self._scrape_projects()
            if projects:
                return Resolution(
                    state=ResolutionState.LOADED,
                    source=Source.LISTING,
                    projects=projects,
                    attempts=attempts,
                )

            attempts.append(Source.HEURISTIC)
            projects = self.guesser.guess_projects()
            if projects:
                return Resolution(
                    state=ResolutionState.LOADED,
                    source=Source.HEURISTIC,
                    projects=projects,
                    attempts=attempts,
                )

            self.logger.info("No projects found by any strategy")
            return Resolution(state=ResolutionState.EMPTY, attempts=attempts)

        except Exception as e:
            self.logger.exception(f"Project resolution failed: {e}")
            return Resolution(state=ResolutionState.ERROR, attempts=attempts, error=str(e))

    def _scrape_projects(self) -> List[Project]:
        try:
            projects = self.live.resolve_projects()
        except FetchError as e:
            self.logger.warning(f"Gallery directory listing unavailable: {e}")
            return []
        self.logger.info(f"Directory listing yielded {len(projects)} projects")
        return projects

    def resolve_hero_images(self) -> List[HeroImage]:
        """
        Resolve the hero banner images with the same fallback order.

        Returns:
            Hero images (possibly empty)
        """
        try:
            manifest = self._cached_manifest()
            if manifest is not None and manifest.hero_images:
                return list(manifest.hero_images)

            try:
                paths = self.live.list_images(self.config.images_dir)
            except FetchError as e:
                self.logger.warning(f"Images directory listing unavailable: {e}")
                paths = []

            hero_images = []
            for path in paths:
                name = path.rsplit('/', 1)[-1]
                if not is_excluded_from_hero(name):
                    hero_images.append(HeroImage(name=name, path=path, size=0))
            if hero_images:
                return hero_images

            return self.guesser.guess_hero_images()

        except Exception as e:
            self.logger.exception(f"Hero image resolution failed: {e}")
            return []

    def find_project(self, folder: str) -> Optional[Project]:
        """
        Look up a single project for the project page.

        Args:
            folder: Folder name, raw or percent-encoded

        Returns:
            Matching project, or None
        """
        wanted = decode_folder_name(folder)
        resolution = self.resolve()
        for project in resolution.projects:
            if project.folder == wanted or decode_folder_name(project.folder) == wanted:
                return project
        return None
