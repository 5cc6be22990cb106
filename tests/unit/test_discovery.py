"""Tests for source catalog discovery."""

from __future__ import annotations

import warnings
from pathlib import Path

import pytest

from core.discovery import discover_catalogs
from core.errors import ConfigurationError


def test_discovers_locales_sorted_by_code(po_dir: Path, make_po) -> None:
    """Locale codes come from file names and are returned in lexicographic order."""

    for locale in ("nl", "de", "pt_BR"):
        make_po(po_dir, locale)

    catalogs = list(discover_catalogs(po_dir))

    assert [catalog.locale for catalog in catalogs] == ["de", "nl", "pt_BR"]
    assert catalogs[0].path == po_dir / "de.po"


def test_ignores_non_catalog_entries(po_dir: Path, make_po) -> None:
    """Only regular *.po files count; templates, notes and directories are skipped."""

    make_po(po_dir, "nl")
    (po_dir / "messages.pot").write_text("", encoding="utf-8")
    (po_dir / "README").write_text("", encoding="utf-8")
    (po_dir / "old.po").mkdir()

    assert [catalog.locale for catalog in discover_catalogs(po_dir)] == ["nl"]


def test_empty_directory_yields_nothing(po_dir: Path) -> None:
    assert list(discover_catalogs(po_dir)) == []


def test_missing_directory_is_configuration_error(tmp_path: Path) -> None:
    """The error is raised on call, before anything is iterated."""

    with pytest.raises(ConfigurationError, match="does not exist"):
        discover_catalogs(tmp_path / "missing")


def test_file_instead_of_directory_is_configuration_error(tmp_path: Path) -> None:
    source = tmp_path / "po"
    source.write_text("", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not a directory"):
        discover_catalogs(source)


def test_exclude_patterns_skip_matching_files(po_dir: Path, make_po) -> None:
    for locale in ("nl", "de", "en_GB", "en_US"):
        make_po(po_dir, locale)

    catalogs = discover_catalogs(po_dir, exclude=["en_*.po", "de.po"])

    assert [catalog.locale for catalog in catalogs] == ["nl"]


def test_exclude_patterns_raise_no_deprecation_warning(po_dir: Path, make_po) -> None:
    make_po(po_dir, "nl")

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        catalogs = list(discover_catalogs(po_dir, exclude=["*.bak"]))

    assert [catalog.locale for catalog in catalogs] == ["nl"]
