"""
catalog-stager - configuration defaults

Values come from the environment where a build pipeline usually provides
them; command-line flags in build_locales.py override every one of them.
"""
import os
from pathlib import Path

# Application identity used as the compiled catalog file name / gettext domain
APP_ID = os.getenv("APP_ID", "")

# Source catalogs: po/{locale}.po
SOURCE_DIR = Path("po")

# In-tree data layout (development / local install)
DATA_DIR = Path("data")

# Portable application bundle layout
BUNDLE_DIR = Path("AppDir") / "share"

# Compiler backend: "babel" (in-process) or "msgfmt" (external tool)
COMPILER = os.getenv("MO_COMPILER", "babel")
MSGFMT = os.getenv("MSGFMT", "msgfmt")

# Raw strings; parsed and checked by core.types
JOBS = os.getenv("LOCALE_JOBS", "1")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
