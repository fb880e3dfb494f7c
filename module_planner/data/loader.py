"""
Data loading and caching.

This module handles loading the module catalog and curriculum files with
caching to prevent repeated file I/O between validations.
"""

import json
from pathlib import Path
from typing import Optional

from ..config import DATA_DIR, CATALOG_FILE, CURRICULA_FILE
from ..exceptions import CurriculumNotFoundError, InvalidFormatError
from ..logging_utils import get_logger
from ..models import Curriculum
from .catalog import ModuleCatalog
from .parser import parse_module, parse_curriculum

logger = get_logger(__name__)


class DataLoader:
    """
    Loads and caches the catalog and curriculum files.

    WHY LAZY LOADING: Properties only load files when first accessed.
    A full NUSMods catalog dump is several megabytes; if you only need a
    curriculum, the catalog is never read.

    DATA SOURCES:
    - modules.json: List of module records in NUSMods API shape
      (moduleCode, moduleCredit, semesterData, prereqTree, ...)
    - curricula.json: {"curricula": [...]} keyed by curriculum name (= major)

    Usage:
        loader = DataLoader()
        catalog = loader.catalog
        curriculum = loader.get_curriculum("Industrial & Systems Engineering")
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        # Private cache variables - None means "not loaded yet"
        self._catalog = None
        self._curricula = None

    def _read_json(self, filename: str):
        filepath = self.data_dir / filename
        if not filepath.exists():
            raise FileNotFoundError(f"Data file not found: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Loaded %s", filepath)
        return data

    @property
    def catalog(self) -> ModuleCatalog:
        """
        Module catalog built from modules.json.

        Records without a module code are skipped with a warning rather than
        failing the whole load.
        """
        if self._catalog is None:
            records = self._read_json(CATALOG_FILE)
            if isinstance(records, dict):
                records = records.get("modules", [])
            modules = []
            for record in records:
                try:
                    modules.append(parse_module(record))
                except InvalidFormatError as exc:
                    logger.warning("Skipping catalog record: %s", exc)
            self._catalog = ModuleCatalog(modules)
        return self._catalog

    @property
    def curricula(self) -> dict:
        """All curricula keyed by display name."""
        if self._curricula is None:
            data = self._read_json(CURRICULA_FILE)
            entries = data.get("curricula", []) if isinstance(data, dict) else data
            self._curricula = {}
            for entry in entries:
                curriculum = parse_curriculum(entry)
                self._curricula[curriculum.display_name] = curriculum
        return self._curricula

    def get_curriculum(self, name: str) -> Optional[Curriculum]:
        """Case-insensitive curriculum lookup. None when there is no match."""
        if name in self.curricula:
            return self.curricula[name]
        for key, curriculum in self.curricula.items():
            if key.lower() == name.lower():
                return curriculum
        return None

    def require_curriculum(self, name: str) -> Curriculum:
        """
        Like get_curriculum(), but a missing curriculum is an error.

        Raises:
            CurriculumNotFoundError
        """
        curriculum = self.get_curriculum(name)
        if curriculum is None:
            raise CurriculumNotFoundError(name)
        return curriculum

    def list_curricula(self) -> list:
        return sorted(self.curricula)
