"""
i18n - gettext catalog helpers built on Babel

Compiled catalogs are looked up the way a gettext runtime does it:
    {locale_root}/{lang}/LC_MESSAGES/{domain}.mo

Example:
    data/locale/nl/LC_MESSAGES/dev.example.app.develop.mo
    -> locale_root=data/locale, lang=nl, domain=dev.example.app.develop
"""
from pathlib import Path
from typing import Optional

from babel.support import Translations
from babel.messages.pofile import read_po
from babel.messages.mofile import write_mo


def compile_po(po_file: Path, mo_file: Path, locale: Optional[str] = None):
    """
    Compile a .po file to a .mo file.

    Args:
        po_file: source catalog
        mo_file: binary catalog to write (overwritten)
        locale: locale code of the catalog, e.g. 'nl'

    Raises:
        babel.messages.pofile.PoFileError: the source catalog is malformed
        OSError: the source cannot be read or the target written
    """
    with open(po_file, 'rb') as fs:
        catalog = read_po(fs, locale, abort_invalid=True)

    with open(mo_file, 'wb') as fs:
        write_mo(fs, catalog)


def load_catalog(locale_root: Path, locale: str, domain: str) -> Optional[Translations]:
    """
    Load a compiled catalog the way the application will at runtime.

    Returns:
        Translations, or None if no catalog exists for (locale, domain)
    """
    trans = Translations.load(
        dirname=str(locale_root),
        locales=[locale],
        domain=domain
    )
    if not isinstance(trans, Translations):
        return None
    return trans
