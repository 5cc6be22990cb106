"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# The project ships flat top-level modules; make them importable when pytest
# runs without an editable install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

APP_ID = "dev.example.app"

PO_TEMPLATE = """\
msgid ""
msgstr ""
"Project-Id-Version: example 1.0\\n"
"POT-Creation-Date: 2024-01-01 12:00+0000\\n"
"PO-Revision-Date: 2024-01-02 12:00+0000\\n"
"Language: {locale}\\n"
"MIME-Version: 1.0\\n"
"Content-Type: text/plain; charset=UTF-8\\n"
"Content-Transfer-Encoding: 8bit\\n"

msgid "Hello"
msgstr "{hello}"

msgid "Now playing"
msgstr "{playing}"
"""

TRANSLATIONS = {
    "nl": ("Hallo", "Nu speelt"),
    "de": ("Hallo Welt", "Jetzt läuft"),
    "fr": ("Bonjour", "En cours"),
}

MALFORMED_PO = """\
msgid "Hello"
msgstr "Hola"
this line is not gettext syntax
"""


def write_po(directory: Path, locale: str, hello: str = "Hallo", playing: str = "Nu speelt") -> Path:
    """Write a well-formed source catalog and return its path."""

    path = directory / f"{locale}.po"
    path.write_text(PO_TEMPLATE.format(locale=locale, hello=hello, playing=playing), encoding="utf-8")
    return path


@pytest.fixture()
def po_dir(tmp_path: Path) -> Path:
    """An empty source catalog directory."""

    directory = tmp_path / "po"
    directory.mkdir()
    return directory


@pytest.fixture()
def example_po_dir(po_dir: Path) -> Path:
    """Source directory holding nl.po and de.po."""

    for locale in ("nl", "de"):
        hello, playing = TRANSLATIONS[locale]
        write_po(po_dir, locale, hello, playing)
    return po_dir


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture()
def bundle_dir(tmp_path: Path) -> Path:
    return tmp_path / "AppDir" / "share"


@pytest.fixture()
def make_po():
    """Factory writing a source catalog: make_po(directory, locale, hello, playing)."""

    return write_po


@pytest.fixture()
def make_malformed_po():
    """Factory writing a catalog the compiler must reject."""

    def _write(directory: Path, locale: str) -> Path:
        path = directory / f"{locale}.po"
        path.write_text(MALFORMED_PO, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def app_id() -> str:
    return APP_ID
