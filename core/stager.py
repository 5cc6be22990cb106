"""
catalog-stager - compile and place catalogs into target layouts

Each (locale, variant, layout) unit is independent: it writes only its own
output path, so units may run in any order or in parallel. A failing unit is
recorded in the report and the rest of the batch carries on.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

from core.compiler import CatalogCompiler
from core.errors import CompilationError
from core.types import (
    BuildReport,
    SourceCatalog,
    StagingUnit,
    TargetLayout,
    UnitFailure,
)

logger = logging.getLogger(__name__)


class CatalogStager:
    """Stages compiled catalogs for one application identity"""

    def __init__(
        self,
        app_id: str,
        layouts: Sequence[TargetLayout],
        compiler: CatalogCompiler,
        jobs: int = 1
    ):
        self.app_id = app_id
        self.layouts = list(layouts)
        self.compiler = compiler
        self.jobs = max(1, jobs)
        self._cancelled = threading.Event()

    def cancel(self):
        """Stop before the next unit; finished outputs stay in place"""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def units_for(self, catalog: SourceCatalog, layout: TargetLayout) -> List[StagingUnit]:
        return [
            StagingUnit(
                catalog=catalog,
                layout=layout,
                variant=variant,
                output=layout.output_path(catalog.locale, self.app_id, variant),
            )
            for variant in layout.variants
        ]

    def plan(self, catalogs: Iterable[SourceCatalog]) -> List[StagingUnit]:
        """All units a run over catalogs would produce, in staging order"""
        catalogs = list(catalogs)
        units = []
        for layout in self.layouts:
            for catalog in catalogs:
                units.extend(self.units_for(catalog, layout))
        return units

    def stage_catalog(self, catalog: SourceCatalog, layout: TargetLayout) -> BuildReport:
        """
        Compile one locale into one layout.

        The release variant is always compiled; the develop variant, when the
        layout wants it, is a second independent compiler run on the same source.
        """
        report = BuildReport()
        units = self.units_for(catalog, layout)

        if self.cancelled:
            report.skipped.extend(units)
            return report

        messages_dir = layout.messages_dir(catalog.locale)
        try:
            messages_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create {messages_dir} for {catalog.locale}/{layout.name}: {e}")
            report.failures.extend(
                UnitFailure(unit, "filesystem", f"cannot create directory {messages_dir}: {e}")
                for unit in units
            )
            return report

        for unit in units:
            if self.cancelled:
                report.skipped.append(unit)
                continue

            failure = self._compile_unit(unit)
            if failure:
                report.failures.append(failure)
            else:
                report.staged.append(unit)

        return report

    def _compile_unit(self, unit: StagingUnit) -> Optional[UnitFailure]:
        try:
            self.compiler.compile(unit.catalog.path, unit.output, unit.locale)
        except CompilationError as e:
            logger.error(f"Failed {unit.describe()}: {e}")
            return UnitFailure(unit, "compile", str(e))
        except OSError as e:
            logger.error(f"Failed {unit.describe()}: {e}")
            return UnitFailure(unit, "filesystem", str(e))

        logger.info(f"Compiled {unit.describe()} -> {unit.output}")
        return None

    def stage(self, catalogs: Iterable[SourceCatalog]) -> BuildReport:
        """
        Run one staging pass per layout over the same catalogs.

        Returns:
            BuildReport with staged units, failures and skipped units in
            layout, locale, variant order
        """
        catalogs = list(catalogs)
        tasks = [(catalog, layout) for layout in self.layouts for catalog in catalogs]
        report = BuildReport()

        if self.jobs == 1 or len(tasks) <= 1:
            for catalog, layout in tasks:
                report.extend(self.stage_catalog(catalog, layout))
            return report

        with ThreadPoolExecutor(max_workers=self.jobs) as executor:
            futures = [
                executor.submit(self.stage_catalog, catalog, layout)
                for catalog, layout in tasks
            ]
            try:
                for future in futures:
                    report.extend(future.result())
            except BaseException:
                self.cancel()
                raise

        return report
