"""
Pytest fixtures for gallerygen tests.
"""

import io
import os
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')


@pytest.fixture
def sample_image_bytes():
    """Fixture providing sample JPEG image bytes."""
    from PIL import Image

    img = Image.new('RGB', (20, 20), color='red')
    buffer = io.BytesIO()
    img.save(buffer, format='JPEG')
    return buffer.getvalue()


@pytest.fixture
def sample_png_bytes():
    """Fixture providing sample PNG image bytes."""
    from PIL import Image

    img = Image.new('RGBA', (20, 20), color=(255, 0, 0, 128))
    buffer = io.BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()


def write_file(path, data=b'x'):
    """Create a file (and its parent directories)."""
    os.makedirs(os.path.dirname(str(path)), exist_ok=True)
    with open(str(path), 'wb') as f:
        f.write(data)


@pytest.fixture
def make_file():
    """Fixture providing the write_file helper."""
    return write_file


@pytest.fixture
def site_root(tmp_path):
    """
    Fixture providing a small site layout on disk.

    Gallery/
        Villa Compound-فيلا كومباوند/   thumb.jpg, 1.jpg, 2.png, notes.txt
        Old Palace Restoration/         only thumb.jpg
        Empty Folder/                   readme.txt
    images/
        banner1.jpg, logo-small.png, thumb-hero.jpg, slides/ (directory)
    """
    gallery = tmp_path / 'Gallery'
    villa = gallery / 'Villa Compound-فيلا كومباوند'
    write_file(villa / 'thumb.jpg', b'thumb')
    write_file(villa / '1.jpg', b'one')
    write_file(villa / '2.png', b'two!')
    write_file(villa / 'notes.txt', b'not an image')

    write_file(gallery / 'Old Palace Restoration' / 'thumb.jpg', b't')
    write_file(gallery / 'Empty Folder' / 'readme.txt', b'nothing')

    images = tmp_path / 'images'
    write_file(images / 'banner1.jpg', b'banner')
    write_file(images / 'logo-small.png', b'logo')
    write_file(images / 'thumb-hero.jpg', b'thumb')
    write_file(images / 'slides' / 'inner.jpg', b'inner')

    return tmp_path


class FakeStorage:
    """
    In-memory storage with a fixed listing order.

    tree maps directory paths to lists of (name, size) for files or
    (name, None) for subdirectories, in listing order.
    """

    def __init__(self, tree):
        self.tree = tree
        self.created = []

    def exists(self, path):
        return path in self.tree

    def make_dirs(self, path):
        self.created.append(path)
        self.tree.setdefault(path, [])

    def list_directory(self, path):
        from gallerygen.storage import DirectoryEntry

        entries = []
        for name, size in self.tree[path]:
            entries.append(DirectoryEntry(
                name=name,
                path=f"{path}/{name}",
                is_dir=size is None,
                size=size or 0,
            ))
        return entries


@pytest.fixture
def fake_storage_factory():
    """Fixture providing the FakeStorage class."""
    return FakeStorage


class FakeHttp:
    """
    HTTP client double serving canned responses by URL.

    Unknown URLs answer 404. An int value is served as that status code.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []

    def fetch(self, url, timeout=None):
        from gallerygen.http_client import FetchError

        self.requests.append((url, timeout))
        body = self.routes.get(url, 404)
        if isinstance(body, int):
            raise FetchError(url, f"HTTP {body}", status=body)
        if isinstance(body, str):
            return body.encode('utf-8')
        return body

    def fetch_text(self, url, timeout=None):
        from gallerygen.http_client import FetchError

        try:
            return self.fetch(url, timeout).decode('utf-8')
        except UnicodeDecodeError as e:
            raise FetchError(url, str(e)) from e

    def requested(self, url):
        return any(u == url for u, _ in self.requests)


@pytest.fixture
def fake_http():
    """Fixture providing an empty FakeHttp (everything 404s)."""
    return FakeHttp()


def listing_html(*hrefs):
    """Build an Apache-style directory listing page."""
    links = '\n'.join(f'<li><a href="{href}">{href}</a></li>' for href in hrefs)
    return (
        '<html><head><title>Index of /</title></head><body>'
        '<h1>Index of /</h1><ul>'
        '<li><a href="../">Parent Directory</a></li>'
        f'{links}'
        '</ul></body></html>'
    )


@pytest.fixture
def listing_page():
    """Fixture providing the listing_html helper."""
    return listing_html


@pytest.fixture
def http_factory():
    """Fixture providing the FakeHttp class."""
    return FakeHttp


@pytest.fixture
def sample_manifest():
    """Fixture providing a sample manifest with two projects."""
    from gallerygen.image_record import HeroImage, ImageEntry, Project
    from gallerygen.manifest import Manifest

    manifest = Manifest.create_new()
    manifest.projects = [
        Project(
            id=1,
            folder='Villa Compound-فيلا كومباوند',
            name='فيلا كومباوند',
            name_en='Villa Compound',
            thumb='Gallery/Villa Compound-فيلا كومباوند/thumb.jpg',
            category='commercial',
            images=[
                ImageEntry('1.jpg', 'Gallery/Villa Compound-فيلا كومباوند/1.jpg', 1000),
                ImageEntry('2.png', 'Gallery/Villa Compound-فيلا كومباوند/2.png', 2048),
            ],
        ),
        Project(
            id=3,
            folder='Nile Tower',
            name='مشروع Nile Tower',
            name_en='Nile Tower',
            thumb='Gallery/Nile Tower/a.jpg',
            category='residential',
            images=[ImageEntry('b.jpg', 'Gallery/Nile Tower/b.jpg', 500)],
        ),
    ]
    manifest.hero_images = [HeroImage('banner1.jpg', 'images/banner1.jpg', 4096)]
    return manifest


@pytest.fixture
def stale_manifest(sample_manifest):
    """Fixture providing a manifest generated long ago."""
    old_time = datetime.now(timezone.utc) - timedelta(days=90)
    sample_manifest.generated_at = old_time.isoformat()
    return sample_manifest


@pytest.fixture
def empty_manifest():
    """Fixture providing an empty manifest."""
    from gallerygen.manifest import Manifest

    return Manifest.create_new()


@pytest.fixture
def temp_manifest_file(sample_manifest, tmp_path):
    """Fixture providing a temporary manifest file."""
    filepath = tmp_path / "manifest.json"
    sample_manifest.save(str(filepath))
    return str(filepath)
