"""
Language session with pluggable persistence.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from .image_record import Project

ARABIC = 'ar'
ENGLISH = 'en'
LANGUAGES = (ARABIC, ENGLISH)
DEFAULT_LANGUAGE = ARABIC

LANGUAGE_KEY = 'language'


class MemoryStore:
    """Key-value store kept in memory."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    Key-value store persisted as a small JSON object on disk.
    """

    def __init__(self, filepath: str, logger: Optional[logging.Logger] = None):
        self.path = Path(filepath)
        self.logger = logger or logging.getLogger(__name__)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)


class Session:
    """
    Current display language, remembered through a key-value store.
    """

    def __init__(self, store=None):
        """
        Args:
            store: Object with get(key) and set(key, value) (default: MemoryStore)
        """
        self.store = store if store is not None else MemoryStore()

    @property
    def language(self) -> str:
        value = self.store.get(LANGUAGE_KEY)
        return value if value in LANGUAGES else DEFAULT_LANGUAGE

    @language.setter
    def language(self, lang: str) -> None:
        if lang not in LANGUAGES:
            raise ValueError(f"Unsupported language: {lang!r} (expected one of {LANGUAGES})")
        self.store.set(LANGUAGE_KEY, lang)

    @property
    def is_rtl(self) -> bool:
        return self.language == ARABIC

    def display_name(self, project: Project) -> str:
        return project.display_name(self.language)
