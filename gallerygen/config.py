"""
ClientConfig - Settings for resolving project data from a live site.
"""

import os
from dataclasses import dataclass
from typing import List
from urllib.parse import urlparse


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    return float(value)


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    return value.strip().lower() in {'yes', 'true', 't', 'y', '1'}


@dataclass
class ClientConfig:
    """
    Configuration for ManifestClient.

    Attributes:
        base_url: Site root the manifest and directories live under
        manifest_name: Manifest file name relative to base_url
        gallery_dir: Gallery directory relative to base_url
        images_dir: Hero images directory relative to base_url
        fetch_timeout: Seconds allowed for manifest and listing requests
        probe_timeout: Seconds allowed for one image probe before it counts as missing
        verify_ssl: Verify TLS certificates
    """
    base_url: str = ''
    manifest_name: str = 'manifest.json'
    gallery_dir: str = 'Gallery'
    images_dir: str = 'images'
    fetch_timeout: float = 10.0
    probe_timeout: float = 2.0
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> 'ClientConfig':
        """Load configuration from GALLERY_* environment variables."""
        return cls(
            base_url=os.environ.get('GALLERY_BASE_URL', ''),
            fetch_timeout=_env_float('GALLERY_FETCH_TIMEOUT', 10.0),
            probe_timeout=_env_float('GALLERY_PROBE_TIMEOUT', 2.0),
            verify_ssl=_env_bool('GALLERY_VERIFY_SSL', True),
        )

    @property
    def site_url(self) -> str:
        """base_url with a trailing slash, ready for urljoin."""
        if self.base_url.endswith('/'):
            return self.base_url
        return f"{self.base_url}/"

    def validate(self) -> List[str]:
        """
        Check the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        if not self.base_url:
            errors.append("Base URL is required (set GALLERY_BASE_URL or pass it on the command line)")
        else:
            parsed = urlparse(self.base_url)
            if parsed.scheme not in ('http', 'https') or not parsed.netloc:
                errors.append(f"Base URL must be an http(s) URL: {self.base_url}")
        if self.fetch_timeout <= 0:
            errors.append("Fetch timeout must be positive")
        if self.probe_timeout <= 0:
            errors.append("Probe timeout must be positive")
        return errors
