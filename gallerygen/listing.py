"""
Directory-listing scraping for sites that expose auto-index pages.
"""

import logging
import posixpath
from typing import List, Optional
from urllib.parse import unquote, urljoin, urlparse

from bs4 import BeautifulSoup

from .image_classifier import is_image
from .image_record import ImageEntry, Project
from .http_client import FetchError, HttpClient
from .name_normalizer import detect_category, normalize
from .scanner import select_thumbnail

PARENT_LINKS = {'../', './'}


class ListingResolver:
    """
    Given a listing URL, return the hrefs found on the page.
    """

    def __init__(self, http: HttpClient, logger: Optional[logging.Logger] = None):
        self.http = http
        self.logger = logger or logging.getLogger(__name__)

    def list_hrefs(self, url: str, timeout: Optional[float] = None) -> List[str]:
        """
        Fetch a directory-listing page and extract its link targets.

        Raises:
            FetchError: If the page cannot be fetched
        """
        html = self.http.fetch_text(url, timeout)
        return self.parse_hrefs(html)

    @staticmethod
    def parse_hrefs(html: str) -> List[str]:
        """Extract href attributes of all anchors, in document order."""
        soup = BeautifulSoup(html, 'html.parser')
        return [a['href'] for a in soup.find_all('a', href=True) if a['href']]

    @staticmethod
    def folder_links(hrefs: List[str]) -> List[str]:
        """
        Keep hrefs that look like subfolders.

        Parent and self links are dropped, as are links that point outside
        the listed directory (absolute paths, other hosts, sort links).
        """
        folders = []
        for href in hrefs:
            if not href.endswith('/') or href in PARENT_LINKS:
                continue
            if href.startswith('/') or urlparse(href).scheme or '?' in href:
                continue
            name = href[2:] if href.startswith('./') else href
            name = name.rstrip('/')
            if name and name != '.' and '/' not in name:
                folders.append(name)
        return folders

    @staticmethod
    def image_links(hrefs: List[str]) -> List[str]:
        """Keep hrefs whose file name is an image."""
        return [href for href in hrefs if is_image(href.split('?', 1)[0])]


class LiveDirectoryResolver:
    """
    Builds projects by scraping the gallery directory listing.
    """

    def __init__(
        self,
        http: HttpClient,
        site_url: str,
        gallery_dir: str = 'Gallery',
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize resolver.

        Args:
            http: HTTP client
            site_url: Site root URL ending with '/'
            gallery_dir: Gallery directory relative to the site root
            timeout: Per-request timeout (None = client default)
            logger: Optional logger instance
        """
        self.http = http
        self.site_url = site_url
        self.gallery_dir = gallery_dir.strip('/')
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.listing = ListingResolver(http, self.logger)

    @property
    def gallery_url(self) -> str:
        return urljoin(self.site_url, f"{self.gallery_dir}/")

    def site_path(self, url: str) -> str:
        """Path of url relative to the site root, without a leading slash."""
        path = unquote(urlparse(url).path)
        base = unquote(urlparse(self.site_url).path)
        if path.startswith(base):
            return path[len(base):]
        return path.lstrip('/')

    def resolve_projects(self) -> List[Project]:
        """
        Scrape every folder linked from the gallery listing.

        Ids are assigned in order over the folders that resolved.

        Raises:
            FetchError: If the gallery listing itself cannot be fetched
        """
        hrefs = self.listing.list_hrefs(self.gallery_url, self.timeout)
        folders = self.listing.folder_links(hrefs)
        self.logger.info(f"Gallery listing links to {len(folders)} folders")

        projects: List[Project] = []
        for folder in folders:
            project = self.scrape_folder(folder, len(projects) + 1)
            if project is None:
                self.logger.info(f"  Could not load project from folder: {folder}")
                continue
            projects.append(project)
        return projects

    def scrape_folder(self, folder: str, project_id: int) -> Optional[Project]:
        """
        Build a project from the listing of one gallery folder.

        Args:
            folder: Folder name as linked from the gallery listing
            project_id: Id to give the project

        Returns:
            Project, or None if the folder is unreachable or has no images
        """
        folder_url = urljoin(self.gallery_url, f"{folder}/")
        try:
            hrefs = self.listing.list_hrefs(folder_url, self.timeout)
        except FetchError as e:
            self.logger.warning(f"  Folder {folder} not accessible: {e}")
            return None

        entries = []
        for href in self.listing.image_links(hrefs):
            url = urljoin(folder_url, href)
            path = self.site_path(url)
            name = posixpath.basename(path)
            entries.append(ImageEntry(name=name, path=path, size=0))

        thumb = select_thumbnail(entries)
        if thumb is None:
            self.logger.info(f"  No images found in folder: {folder}")
            return None

        names = normalize(folder)
        return Project(
            id=project_id,
            folder=unquote(folder),
            name=names.ar,
            name_en=names.en,
            thumb=thumb.path,
            category=detect_category(unquote(folder)),
            images=[e for e in entries if e is not thumb],
        )

    def list_images(self, images_dir: str) -> List[str]:
        """
        Image paths linked from a flat directory listing.

        Raises:
            FetchError: If the listing cannot be fetched
        """
        listing_url = urljoin(self.site_url, f"{images_dir.strip('/')}/")
        hrefs = self.listing.list_hrefs(listing_url, self.timeout)
        paths = []
        for href in self.listing.image_links(hrefs):
            paths.append(self.site_path(urljoin(listing_url, href)))
        return paths
