"""Tests for the language session."""

import pytest
from gallerygen.image_record import Project
from gallerygen.session import JsonFileStore, MemoryStore, Session


@pytest.fixture
def project():
    return Project(1, 'Nile Tower-برج النيل', 'برج النيل', 'Nile Tower', 'Gallery/x/thumb.jpg', 'residential')


class TestSession:
    """Tests for Session class."""

    def test_default_arabic(self):
        session = Session()

        assert session.language == 'ar'
        assert session.is_rtl

    def test_switch_language(self, project):
        session = Session()

        session.language = 'en'

        assert session.language == 'en'
        assert not session.is_rtl
        assert session.display_name(project) == 'Nile Tower'

    def test_display_name_arabic(self, project):
        assert Session().display_name(project) == 'برج النيل'

    def test_unsupported_language(self):
        session = Session()

        with pytest.raises(ValueError):
            session.language = 'fr'
        assert session.language == 'ar'

    def test_invalid_stored_value_ignored(self):
        session = Session(MemoryStore({'language': 'de'}))
        assert session.language == 'ar'

    def test_shared_store(self):
        store = MemoryStore()
        Session(store).language = 'en'
        assert Session(store).language == 'en'


class TestJsonFileStore:
    """Tests for JsonFileStore class."""

    def test_persists_across_instances(self, tmp_path):
        path = str(tmp_path / 'state' / 'session.json')

        Session(JsonFileStore(path)).language = 'en'

        assert Session(JsonFileStore(path)).language == 'en'

    def test_missing_file(self, tmp_path):
        assert JsonFileStore(str(tmp_path / 'none.json')).get('language') is None

    def test_corrupt_file_ignored(self, tmp_path):
        path = tmp_path / 'session.json'
        path.write_text('{broken', encoding='utf-8')

        assert Session(JsonFileStore(str(path))).language == 'ar'

    def test_set_keeps_other_keys(self, tmp_path):
        path = tmp_path / 'session.json'
        path.write_text('{"theme": "dark"}', encoding='utf-8')
        store = JsonFileStore(str(path))

        store.set('language', 'en')

        assert store.get('theme') == 'dark'
        assert store.get('language') == 'en'
