"""
HttpClient - Minimal GET wrapper around urllib3.
"""

import logging
from typing import Optional

import urllib3


class FetchError(Exception):
    """Raised when a resource cannot be fetched (network error or non-2xx)."""

    def __init__(self, url: str, message: str, status: Optional[int] = None):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status = status


class HttpClient:
    """
    Fetches site resources over HTTP.

    Connection and read failures are not retried; the caller moves on to
    its next strategy instead. Redirects (e.g. 'Gallery' -> 'Gallery/') are
    followed.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Default total timeout per request in seconds
            verify_ssl: Verify TLS certificates
            logger: Optional logger instance
        """
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        cert_reqs = 'CERT_REQUIRED' if verify_ssl else 'CERT_NONE'
        retries = urllib3.Retry(connect=0, read=0, status=0, other=0, redirect=5)
        self._pool = urllib3.PoolManager(cert_reqs=cert_reqs, retries=retries)

    def fetch(self, url: str, timeout: Optional[float] = None) -> bytes:
        """
        GET a URL and return the body.

        Args:
            url: Absolute URL
            timeout: Override of the default timeout

        Returns:
            Response body

        Raises:
            FetchError: On connection problems, timeouts or non-2xx status
        """
        total = timeout if timeout is not None else self.timeout
        self.logger.debug(f"GET {url} (timeout {total}s)")
        try:
            response = self._pool.request(
                'GET', url,
                timeout=urllib3.Timeout(total=total),
                redirect=True,
            )
        except urllib3.exceptions.HTTPError as e:
            raise FetchError(url, str(e)) from e

        if not 200 <= response.status < 300:
            raise FetchError(url, f"HTTP {response.status}", status=response.status)

        return response.data

    def fetch_text(self, url: str, timeout: Optional[float] = None) -> str:
        """
        GET a URL and decode the body as UTF-8.

        Raises:
            FetchError: On fetch failure or a body that is not valid UTF-8
        """
        data = self.fetch(url, timeout)
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise FetchError(url, f"Response is not valid UTF-8: {e}") from e
