"""
catalog-stager - source catalog discovery

Source catalogs are named {locale}.po and live directly in the source
directory; the locale code is the file name without its extension.
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator, List

import pathspec

from core.errors import ConfigurationError
from core.types import SourceCatalog

logger = logging.getLogger(__name__)

PO_SUFFIX = ".po"


def _list_po_files(source_dir: Path) -> List[Path]:
    if not source_dir.exists():
        raise ConfigurationError(f"Source catalog directory does not exist: {source_dir}")
    if not source_dir.is_dir():
        raise ConfigurationError(f"Source catalog path is not a directory: {source_dir}")

    try:
        entries = list(source_dir.iterdir())
    except OSError as e:
        raise ConfigurationError(f"Cannot read source catalog directory {source_dir}: {e}") from e

    return [path for path in entries if path.suffix == PO_SUFFIX and path.is_file()]


def discover_catalogs(source_dir: Path, exclude: Iterable[str] = ()) -> Iterator[SourceCatalog]:
    """
    Find the source catalogs to build.

    The directory is listed immediately so configuration errors surface
    before any compilation starts; catalogs are then yielded lazily in
    locale order.

    Args:
        source_dir: directory holding {locale}.po files
        exclude: gitignore-style patterns matched against file names

    Returns:
        iterator of SourceCatalog sorted by locale code
    """
    source_dir = Path(source_dir)
    po_files = _list_po_files(source_dir)

    spec = pathspec.PathSpec.from_lines("gitignore", list(exclude))
    selected = []
    for po_file in po_files:
        if spec.match_file(po_file.name):
            logger.debug(f"Excluded: {po_file}")
            continue
        selected.append(po_file)

    selected.sort(key=lambda path: path.stem)
    logger.debug(f"Discovered {len(selected)} catalog(s) in {source_dir}")

    return (SourceCatalog(locale=path.stem, path=path) for path in selected)
