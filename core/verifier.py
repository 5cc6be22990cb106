"""
catalog-stager - check staged catalogs load under their runtime domain
"""
import logging
from typing import List

from core.types import BuildReport, UnitFailure
from i18n import load_catalog

logger = logging.getLogger(__name__)


def verify_report(report: BuildReport, app_id: str) -> List[UnitFailure]:
    """
    Load every staged output through gettext lookup.

    A release catalog must be found under domain {app_id}, a develop catalog
    under {app_id}.develop, both below {layout.root}/locale.

    Returns:
        one UnitFailure(kind="verify") per output that cannot be loaded
    """
    failures = []
    for unit in report.staged:
        domain = unit.variant.domain(app_id)
        # gettext lookup falls back from pt_BR to pt, so check the exact file first
        if not unit.output.is_file():
            logger.error(f"Missing catalog {unit.output}")
            failures.append(UnitFailure(unit, "verify", f"output file missing: {unit.output}"))
            continue

        try:
            trans = load_catalog(unit.layout.locale_root, unit.locale, domain)
        except Exception as e:
            logger.error(f"Unreadable catalog {unit.output}: {e}")
            failures.append(UnitFailure(unit, "verify", f"cannot load catalog: {e}"))
            continue

        if trans is None:
            logger.error(f"No catalog found for {unit.locale} in domain {domain}")
            failures.append(UnitFailure(unit, "verify", f"domain {domain} not found for locale {unit.locale}"))
            continue

        logger.debug(f"Verified {unit.describe()}")

    return failures
