"""
Gallery manifest package for the company website.

Two sides:
    1. Generation: scan Gallery/ and images/ and write manifest.json
    2. Consumption: resolve projects from manifest.json, falling back to
       directory listings and then to probing conventional names
"""

__version__ = "1.0.0"

from .image_record import ImageEntry, HeroImage, Project
from .name_normalizer import ProjectName, normalize, detect_category
from .storage import LocalStorage
from .walker import DirectoryWalker
from .manifest_stats import ManifestStats
from .manifest import Manifest, ManifestFormatError
from .scanner_progress import ScannerProgress
from .scanner import ProjectCollector, HeroImageCollector
from .builder import ManifestBuilder
from .config import ClientConfig
from .http_client import HttpClient, FetchError
from .listing import ListingResolver, LiveDirectoryResolver
from .heuristics import HeuristicGuesser
from .client import ManifestClient, Resolution, ResolutionState
from .session import Session
from .reporter import Reporter

__all__ = [
    "ImageEntry",
    "HeroImage",
    "Project",
    "ProjectName",
    "normalize",
    "detect_category",
    "LocalStorage",
    "DirectoryWalker",
    "ManifestStats",
    "Manifest",
    "ManifestFormatError",
    "ScannerProgress",
    "ProjectCollector",
    "HeroImageCollector",
    "ManifestBuilder",
    "ClientConfig",
    "HttpClient",
    "FetchError",
    "ListingResolver",
    "LiveDirectoryResolver",
    "HeuristicGuesser",
    "ManifestClient",
    "Resolution",
    "ResolutionState",
    "Session",
    "Reporter",
]
