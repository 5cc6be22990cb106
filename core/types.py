"""
catalog-stager - data types
"""
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Sequence, Tuple

import config
from core.errors import ConfigurationError


class BuildVariant(Enum):
    """Compiled catalog naming variant"""
    RELEASE = "release"
    DEVELOP = "develop"

    def domain(self, app_id: str) -> str:
        """gettext domain the application binds for this variant"""
        if self is BuildVariant.RELEASE:
            return app_id
        return f"{app_id}.{self.value}"

    def file_name(self, app_id: str) -> str:
        return f"{self.domain(app_id)}.mo"


@dataclass(frozen=True)
class SourceCatalog:
    """A translated .po file for one locale"""
    locale: str
    path: Path


@dataclass(frozen=True)
class TargetLayout:
    """
    A directory tree compiled catalogs are staged into.

    Outputs live at {root}/locale/{locale}/LC_MESSAGES/{app_id}[.{variant}].mo
    """
    name: str
    root: Path
    variants: Tuple[BuildVariant, ...] = (BuildVariant.RELEASE,)

    @property
    def locale_root(self) -> Path:
        return self.root / "locale"

    def messages_dir(self, locale: str) -> Path:
        return self.locale_root / locale / "LC_MESSAGES"

    def output_path(self, locale: str, app_id: str, variant: BuildVariant) -> Path:
        return self.messages_dir(locale) / variant.file_name(app_id)


LOCAL_LAYOUT = "local"
BUNDLE_LAYOUT = "bundle"
LAYOUT_NAMES = (LOCAL_LAYOUT, BUNDLE_LAYOUT)


def default_layouts(data_dir: Path, bundle_dir: Path) -> List[TargetLayout]:
    """Local data layout (release + develop) followed by the bundle layout (release)"""
    return [
        TargetLayout(LOCAL_LAYOUT, Path(data_dir), (BuildVariant.RELEASE, BuildVariant.DEVELOP)),
        TargetLayout(BUNDLE_LAYOUT, Path(bundle_dir), (BuildVariant.RELEASE,)),
    ]


@dataclass(frozen=True)
class StagingUnit:
    """One compiled catalog: (locale, layout, variant) -> output path"""
    catalog: SourceCatalog
    layout: TargetLayout
    variant: BuildVariant
    output: Path

    @property
    def locale(self) -> str:
        return self.catalog.locale

    def describe(self) -> str:
        return f"{self.locale}/{self.variant.value}/{self.layout.name}"


@dataclass
class UnitFailure:
    """A unit that did not produce a valid output"""
    unit: StagingUnit
    kind: str  # "compile", "filesystem" or "verify"
    message: str

    def __str__(self) -> str:
        return f"[{self.kind}] {self.unit.describe()} ({self.unit.output}): {self.message}"


@dataclass
class BuildReport:
    """Aggregated result of a staging run"""
    staged: List[StagingUnit] = field(default_factory=list)
    failures: List[UnitFailure] = field(default_factory=list)
    skipped: List[StagingUnit] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures and not self.skipped

    @property
    def outputs(self) -> List[Path]:
        return [unit.output for unit in self.staged]

    def extend(self, other: "BuildReport"):
        self.staged.extend(other.staged)
        self.failures.extend(other.failures)
        self.skipped.extend(other.skipped)


def parse_jobs(value) -> int:
    """Parallel task count from a flag or LOCALE_JOBS"""
    try:
        jobs = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"jobs must be an integer, got {value!r}") from None
    if jobs < 1:
        raise ConfigurationError(f"jobs must be at least 1, got {jobs}")
    return jobs


def parse_log_level(value: str) -> int:
    """Numeric logging level from a name such as 'INFO' or 'debug'"""
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {value!r}")
    return level


@dataclass
class BuildSettings:
    """Resolved configuration for one run"""
    app_id: str
    source_dir: Path = config.SOURCE_DIR
    data_dir: Path = config.DATA_DIR
    bundle_dir: Path = config.BUNDLE_DIR
    layouts: Sequence[str] = LAYOUT_NAMES
    locales: Sequence[str] = ()
    exclude: Sequence[str] = ()
    compiler: str = config.COMPILER
    msgfmt: str = config.MSGFMT
    jobs: int = 1
    verify: bool = False
    dry_run: bool = False

    @classmethod
    def from_args(cls, args) -> "BuildSettings":
        """
        Build settings from parsed CLI arguments, falling back to config.

        Raises:
            ConfigurationError: a value cannot be parsed
        """
        app_id = args.app_id if args.app_id is not None else config.APP_ID
        return cls(
            app_id=app_id,
            source_dir=Path(args.source) if args.source else config.SOURCE_DIR,
            data_dir=Path(args.data_dir) if args.data_dir else config.DATA_DIR,
            bundle_dir=Path(args.bundle_dir) if args.bundle_dir else config.BUNDLE_DIR,
            layouts=tuple(args.layout) if args.layout else LAYOUT_NAMES,
            locales=tuple(args.locale or ()),
            exclude=tuple(args.exclude or ()),
            compiler=args.compiler or config.COMPILER,
            msgfmt=args.msgfmt or config.MSGFMT,
            jobs=parse_jobs(args.jobs if args.jobs is not None else config.JOBS),
            verify=args.verify,
            dry_run=args.dry_run,
        )

    def validate(self):
        """Raise ConfigurationError before any work begins"""
        if not self.app_id or not self.app_id.strip():
            raise ConfigurationError("Application id is not set (use --app-id or APP_ID)")
        if os.sep in self.app_id or (os.altsep and os.altsep in self.app_id):
            raise ConfigurationError(f"Application id must not contain a path separator: {self.app_id!r}")
        if self.compiler not in ("babel", "msgfmt"):
            raise ConfigurationError(f"Unknown compiler: {self.compiler!r}")
        if self.jobs < 1:
            raise ConfigurationError(f"jobs must be at least 1, got {self.jobs}")
        unknown = [name for name in self.layouts if name not in LAYOUT_NAMES]
        if unknown:
            raise ConfigurationError(f"Unknown layout: {', '.join(unknown)}")

    def target_layouts(self) -> List[TargetLayout]:
        return [
            layout for layout in default_layouts(self.data_dir, self.bundle_dir)
            if layout.name in self.layouts
        ]
