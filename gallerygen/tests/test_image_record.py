"""Tests for ImageEntry, HeroImage and Project records."""

import pytest
from gallerygen.image_record import HeroImage, ImageEntry, Project


@pytest.fixture
def project():
    return Project(
        id=2,
        folder='Nile Tower-برج النيل',
        name='برج النيل',
        name_en='Nile Tower',
        thumb='Gallery/Nile Tower-برج النيل/thumb.jpg',
        category='residential',
        images=[
            ImageEntry('1.jpg', 'Gallery/Nile Tower-برج النيل/1.jpg', 100),
            ImageEntry('2.jpg', 'Gallery/Nile Tower-برج النيل/2.jpg', 250),
        ],
    )


class TestImageEntry:
    """Tests for ImageEntry."""

    def test_with_prefix(self):
        entry = ImageEntry('a.jpg', 'Tower/a.jpg', 10)

        prefixed = entry.with_prefix('Gallery/')

        assert prefixed.path == 'Gallery/Tower/a.jpg'
        assert prefixed.name == 'a.jpg'
        assert entry.path == 'Tower/a.jpg'

    def test_with_empty_prefix(self):
        entry = ImageEntry('a.jpg', 'a.jpg', 10)
        assert entry.with_prefix('') is entry

    def test_from_dict_missing_size(self):
        """Test size defaults to 0 when absent."""
        entry = ImageEntry.from_dict({'name': 'a.jpg', 'path': 'Gallery/x/a.jpg'})
        assert entry.size == 0

    def test_hero_to_dict(self):
        hero = HeroImage('banner1.jpg', 'images/banner1.jpg', 4096)
        assert hero.to_dict() == {
            'name': 'banner1.jpg', 'path': 'images/banner1.jpg', 'size': 4096,
        }


class TestProject:
    """Tests for Project."""

    def test_image_count_excludes_thumbnail(self, project):
        assert project.image_count == 2

    def test_total_bytes(self, project):
        assert project.total_bytes == 350

    def test_display_name(self, project):
        assert project.display_name('ar') == 'برج النيل'
        assert project.display_name('en') == 'Nile Tower'

    def test_to_dict_keys(self, project):
        """Test the wire format uses camelCase keys."""
        data = project.to_dict()

        assert set(data) == {
            'id', 'folder', 'name', 'nameEn', 'thumb', 'images', 'imageCount', 'category',
        }
        assert data['nameEn'] == 'Nile Tower'
        assert data['imageCount'] == 2
        assert data['images'][0] == {
            'name': '1.jpg', 'path': 'Gallery/Nile Tower-برج النيل/1.jpg', 'size': 100,
        }

    def test_from_dict(self, project):
        restored = Project.from_dict(project.to_dict())
        assert restored == project

    def test_from_dict_missing_category(self):
        """Test projects without a category read as residential."""
        project = Project.from_dict({
            'id': 1, 'folder': 'x', 'name': 'x', 'nameEn': 'x', 'thumb': 'Gallery/x/a.jpg',
        })

        assert project.category == 'residential'
        assert project.images == []
