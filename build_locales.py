"""
catalog-stager - compile po/*.po and stage the .mo files

Usage:
    python build_locales.py --app-id dev.example.app
    python build_locales.py --layout bundle --locale nl   # retry one unit
    python build_locales.py --dry-run                     # list planned outputs

Outputs:
    data/locale/{lang}/LC_MESSAGES/{app_id}.mo
    data/locale/{lang}/LC_MESSAGES/{app_id}.develop.mo
    AppDir/share/locale/{lang}/LC_MESSAGES/{app_id}.mo
"""
import argparse
import logging
import sys
from typing import List, Optional

import config
from core.compiler import create_compiler
from core.discovery import discover_catalogs
from core.errors import ConfigurationError
from core.stager import CatalogStager
from core.types import LAYOUT_NAMES, BuildReport, BuildSettings, parse_log_level
from core.verifier import verify_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130


def print_header(text: str):
    """Print a section title"""
    print("\n" + "=" * 50)
    print(f"  {text}")
    print("=" * 50)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile gettext catalogs and stage them for the app")
    parser.add_argument("--source", type=str, default=None,
                        help=f"Source catalog directory (default: {config.SOURCE_DIR})")
    parser.add_argument("--data-dir", type=str, default=None,
                        help=f"Local data layout root (default: {config.DATA_DIR})")
    parser.add_argument("--bundle-dir", type=str, default=None,
                        help=f"Bundle layout root (default: {config.BUNDLE_DIR})")
    parser.add_argument("--app-id", type=str, default=None,
                        help="Application id used as catalog name (or set APP_ID)")
    parser.add_argument("--layout", action="append", choices=LAYOUT_NAMES,
                        help="Only stage this layout (repeatable)")
    parser.add_argument("--locale", action="append",
                        help="Only stage this locale (repeatable)")
    parser.add_argument("--exclude", action="append",
                        help="Skip source files matching this gitignore-style pattern (repeatable)")
    parser.add_argument("--compiler", choices=("babel", "msgfmt"), default=None,
                        help=f"Catalog compiler (default: {config.COMPILER})")
    parser.add_argument("--msgfmt", type=str, default=None,
                        help=f"msgfmt executable (default: {config.MSGFMT})")
    parser.add_argument("-j", "--jobs", type=int, default=None,
                        help=f"Parallel tasks, one per locale and layout (default: {config.JOBS})")
    parser.add_argument("--verify", action="store_true",
                        help="Load every staged catalog through gettext lookup afterwards")
    parser.add_argument("--dry-run", action="store_true",
                        help="Only list the outputs that would be written")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def print_summary(report: BuildReport):
    print_header("Summary")
    print(f"  Staged:  {len(report.staged)}")
    print(f"  Failed:  {len(report.failures)}")
    if report.skipped:
        print(f"  Skipped: {len(report.skipped)}")

    for failure in report.failures:
        print(f"❌ {failure}")
    for unit in report.skipped:
        print(f"⏭  {unit.describe()} ({unit.output}): cancelled")

    if report.ok:
        print("✅ All catalogs staged")


def run(settings: BuildSettings) -> BuildReport:
    """
    Discover, stage and optionally verify.

    Raises:
        ConfigurationError: before any compilation when the run cannot start
    """
    settings.validate()
    catalogs = discover_catalogs(settings.source_dir, settings.exclude)
    if settings.locales:
        wanted = set(settings.locales)
        catalogs = [catalog for catalog in catalogs if catalog.locale in wanted]
    catalogs = list(catalogs)

    compiler = create_compiler(settings.compiler, settings.msgfmt)
    stager = CatalogStager(settings.app_id, settings.target_layouts(), compiler, jobs=settings.jobs)

    if settings.dry_run:
        for unit in stager.plan(catalogs):
            print(f"{unit.describe()}: {unit.catalog.path} -> {unit.output}")
        return BuildReport()

    logger.info(f"Staging {len(catalogs)} locale(s) for {settings.app_id} with {compiler.name}")
    try:
        report = stager.stage(catalogs)
    except KeyboardInterrupt:
        stager.cancel()
        raise

    if settings.verify:
        report.failures.extend(verify_report(report, settings.app_id))

    return report


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else parse_log_level(config.LOG_LEVEL)
        settings = BuildSettings.from_args(args)
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}")
        return EXIT_CONFIG

    logging.basicConfig(level=level, format=config.LOG_FORMAT)
    print_header(f"Locale staging: {settings.app_id or '?'}")

    try:
        report = run(settings)
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}")
        return EXIT_CONFIG
    except KeyboardInterrupt:
        print("❌ Interrupted")
        return EXIT_INTERRUPTED

    if settings.dry_run:
        return EXIT_OK

    print_summary(report)
    return EXIT_OK if report.ok else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
