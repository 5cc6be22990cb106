"""
catalog-stager - .po to .mo compilers

Every compiler writes to a temporary sibling file and only renames it over
the target once compilation succeeded, so a failed unit never leaves a
half-written catalog at the output path.
"""
import logging
import subprocess
from pathlib import Path

from babel.messages.pofile import PoFileError

import config
from core.errors import CompilationError, ConfigurationError
from i18n import compile_po

logger = logging.getLogger(__name__)


def _temp_path(output: Path) -> Path:
    return output.with_name(output.name + ".tmp")


class CatalogCompiler:
    """Turns one source catalog into one binary catalog"""

    name = "base"

    def compile(self, source: Path, output: Path, locale: str):
        """
        Compile source into output, replacing any existing file.

        Raises:
            CompilationError: the catalog could not be compiled
            OSError: the compiled catalog could not be written into place
        """
        temp_path = _temp_path(output)
        try:
            self._compile(source, temp_path, locale)
            temp_path.replace(output)
        except Exception as e:
            temp_path.unlink(missing_ok=True)
            raise e

    def _compile(self, source: Path, output: Path, locale: str):
        raise NotImplementedError


class BabelCompiler(CatalogCompiler):
    """In-process compiler using Babel's read_po / write_mo"""

    name = "babel"

    def _compile(self, source: Path, output: Path, locale: str):
        try:
            compile_po(source, output, locale)
        except PoFileError as e:
            raise CompilationError(source, output, f"malformed catalog: {e}") from e
        except OSError as e:
            if e.filename is not None and Path(e.filename) == Path(source):
                raise CompilationError(source, output, f"cannot read catalog: {e}") from e
            raise
        except Exception as e:
            # babel surfaces header / locale problems as plain ValueErrors and friends
            raise CompilationError(source, output, f"{type(e).__name__}: {e}") from e


class MsgfmtCompiler(CatalogCompiler):
    """Runs the external GNU gettext msgfmt tool"""

    name = "msgfmt"

    def __init__(self, executable: str = config.MSGFMT):
        self.executable = executable

    def _compile(self, source: Path, output: Path, locale: str):
        args = [self.executable, "-o", str(output), str(source)]
        logger.debug(f"Running: {' '.join(args)}")

        try:
            result = subprocess.run(args, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise CompilationError(source, output, f"compiler not found: {self.executable}") from e

        if result.returncode != 0:
            raise CompilationError(
                source,
                output,
                f"{self.executable} exited with status {result.returncode}",
                detail=(result.stderr or result.stdout).strip() or None,
            )


def create_compiler(name: str, msgfmt: str = config.MSGFMT) -> CatalogCompiler:
    if name == BabelCompiler.name:
        return BabelCompiler()
    if name == MsgfmtCompiler.name:
        return MsgfmtCompiler(msgfmt)
    raise ConfigurationError(f"Unknown compiler: {name!r}")
