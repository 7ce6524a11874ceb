"""
Command Line Interface for manifest generation and inspection.
"""

import argparse
import logging
import urllib3
from typing import List, Optional

from .builder import ManifestBuilder
from .client import ManifestClient, ResolutionState
from .config import ClientConfig
from .manifest import Manifest
from .reporter import Reporter
from .scanner_progress import ScannerProgress
from .session import LANGUAGES, JsonFileStore, MemoryStore, Session
from .storage import LocalStorage


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('urllib3').setLevel(logging.WARNING)

    return logging.getLogger('gallerygen')


def get_client_config(args: argparse.Namespace) -> ClientConfig:
    """Get client configuration from environment and CLI overrides."""
    config = ClientConfig.from_env()

    if getattr(args, 'base_url', None):
        config.base_url = args.base_url
    if getattr(args, 'timeout', None):
        config.fetch_timeout = args.timeout
    if getattr(args, 'probe_timeout', None):
        config.probe_timeout = args.probe_timeout
    if getattr(args, 'insecure', False):
        config.verify_ssl = False

    return config


def cmd_generate(args: argparse.Namespace) -> int:
    """Execute generate command."""
    logger = setup_logging(args.verbose)

    print("=== Gallery Manifest Generator ===")
    print()

    try:
        builder = ManifestBuilder(LocalStorage(logger), logger)
        progress = ScannerProgress(show_files=True, logger=logger)
        manifest = builder.build(args.gallery, args.images, progress=progress)
        builder.persist(manifest, args.output)
    except Exception as e:
        logger.exception(f"Manifest generation failed: {e}")
        return 1

    stats = manifest.stats
    print()
    print(f"✓ Manifest generated successfully: {args.output}")
    print(f"  - Projects: {stats.total_projects}")
    print(f"  - Total project images: {stats.total_images}")
    print(f"  - Hero images: {stats.total_hero_images}")

    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Execute report command."""
    logger = setup_logging(args.verbose)

    try:
        manifest = Manifest.load(args.manifest)
    except FileNotFoundError:
        logger.error(f"Manifest not found: {args.manifest}")
        return 1
    except Exception as e:
        logger.error(f"Failed to load manifest: {e}")
        return 1

    reporter = Reporter()
    if args.type == 'summary':
        reporter.report_summary(manifest)
    elif args.type == 'detailed':
        reporter.report_detailed(manifest)

    return 0 if not manifest.check_consistency() else 1


def cmd_resolve(args: argparse.Namespace) -> int:
    """Execute resolve command."""
    logger = setup_logging(args.verbose)

    config = get_client_config(args)
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    if not config.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    store = JsonFileStore(args.state_file, logger) if args.state_file else MemoryStore()
    session = Session(store)
    if args.lang:
        session.language = args.lang

    try:
        client = ManifestClient(config, logger=logger)
        resolution = client.resolve()
        resolution.hero_images = client.resolve_hero_images()
    except Exception as e:
        logger.exception(f"Resolve failed: {e}")
        return 1

    Reporter().report_resolution(resolution, session.language)
    return 0 if resolution.state is not ResolutionState.ERROR else 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='gallerygen',
        description='Manifest generator for the project gallery website',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflow:
  1. Generate: python -m gallerygen generate
  2. Report:   python -m gallerygen report --manifest manifest.json
  3. Resolve:  python -m gallerygen resolve https://example.com/ --lang en

Site layout:
  Gallery/<project folder>/   one folder per project, optional thumb.jpg
  images/                     flat banner images (names containing
                              'thumb' or 'logo' are ignored)
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Generate command
    gen_parser = subparsers.add_parser('generate', help='Scan the site directories and write the manifest')
    gen_parser.add_argument('-g', '--gallery', default='./Gallery', help='Gallery directory (default: ./Gallery)')
    gen_parser.add_argument('-i', '--images', default='./images', help='Hero images directory (default: ./images)')
    gen_parser.add_argument('-o', '--output', default='./manifest.json', help='Output manifest file')
    gen_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    # Report command
    report_parser = subparsers.add_parser('report', help='Report on a generated manifest')
    report_parser.add_argument('-m', '--manifest', default='./manifest.json', help='Input manifest file')
    report_parser.add_argument('-t', '--type', choices=['summary', 'detailed'],
                               default='summary', help='Report type')
    report_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    # Resolve command
    resolve_parser = subparsers.add_parser('resolve', help='Resolve projects from a live site')
    resolve_parser.add_argument('base_url', nargs='?', help='Site root URL (default: GALLERY_BASE_URL)')
    resolve_parser.add_argument('-l', '--lang', choices=LANGUAGES, help='Display language')
    resolve_parser.add_argument('--state-file', metavar='PATH',
                                help='File that remembers the chosen language')
    resolve_parser.add_argument('--timeout', type=float, help='Manifest/listing timeout in seconds')
    resolve_parser.add_argument('--probe-timeout', type=float,
                                help='Image probe timeout in seconds (default: 2)')
    resolve_parser.add_argument('-k', '--insecure', action='store_true', help='Skip TLS verification')
    resolve_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'generate':
        return cmd_generate(parsed_args)
    elif parsed_args.command == 'report':
        return cmd_report(parsed_args)
    elif parsed_args.command == 'resolve':
        return cmd_resolve(parsed_args)

    return 1
