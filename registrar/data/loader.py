"""
Data loading and caching.

This module handles loading exported registrar data files with caching to
prevent repeated file I/O while building reports.
"""

import json
from pathlib import Path
from typing import Optional

from ..config import DATA_DIR


def term_slug(term: str) -> str:
    """ "Spring 2026" -> "spring_2026" (matches export filenames)."""
    return "_".join(term.strip().lower().split())


class DataLoader:
    """
    Loads and caches exported registrar data.

    WHY CACHING: A batch report touches the same registration schedule and
    degree requirement documents for every student. Loading them once
    prevents repeated file I/O.

    DATA SOURCES (under data_dir):
    - transcripts/<student_id>.json: {"enrollments": [...], "programs": [...]}
    - registration_schedules/<term>.json: list of window rows for one term
      (e.g. spring_2026.json)
    - degree_requirements/<SUBJECT>_<DEGREE>.json: requirement documents
      (e.g. CSE_BS.json, CSE_MIN.json)
    - waivers.json: list of time_conflict_waivers rows

    Usage:
        loader = DataLoader()
        rows = loader.load_registration_schedule("Spring 2026")
        doc = loader.load_degree_requirements("CSE", "BS")
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        # Private caches keyed by file path
        self._schedule_cache = {}
        self._requirements_cache = {}
        self._waivers = None

    @property
    def transcripts_dir(self) -> Path:
        return self.data_dir / "transcripts"

    @property
    def schedules_dir(self) -> Path:
        return self.data_dir / "registration_schedules"

    @property
    def requirements_dir(self) -> Path:
        return self.data_dir / "degree_requirements"

    @staticmethod
    def load_json(path) -> object:
        """Load any JSON file. Raises FileNotFoundError if it is missing."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")
        with open(path, "r") as f:
            return json.load(f)

    def load_transcript(self, student_id) -> dict:
        """
        Load a student's exported transcript.

        Transcripts are never cached - they change every time a grade posts.
        """
        data = self.load_json(self.transcripts_dir / f"{student_id}.json")
        if isinstance(data, list):
            data = {"enrollments": data, "programs": []}
        data.setdefault("enrollments", [])
        data.setdefault("programs", [])
        return data

    def load_registration_schedule(self, term: str) -> list:
        """Load the window rows for one term."""
        filepath = self.schedules_dir / f"{term_slug(term)}.json"
        if filepath not in self._schedule_cache:
            data = self.load_json(filepath)
            self._schedule_cache[filepath] = data.get("windows", []) if isinstance(data, dict) else data
        return self._schedule_cache[filepath]

    def load_degree_requirements(self, subject: str, degree_type: str) -> Optional[dict]:
        """
        Load the requirement document for a program.

        Returns None when no document exists - a declared program without a
        published document is a normal state, not an error.
        """
        filepath = self.requirements_dir / f"{subject.upper()}_{degree_type.upper()}.json"
        if filepath not in self._requirements_cache:
            try:
                self._requirements_cache[filepath] = self.load_json(filepath)
            except FileNotFoundError:
                self._requirements_cache[filepath] = None
        return self._requirements_cache[filepath]

    def load_waivers(self) -> list:
        if self._waivers is None:
            self._waivers = self.load_json(self.data_dir / "waivers.json")
        return self._waivers

    def list_terms(self) -> list:
        """List terms that have a registration schedule export."""
        terms = []
        for f in self.schedules_dir.glob("*.json"):
            terms.append(" ".join(part.capitalize() for part in f.stem.split("_")))
        return sorted(terms)
