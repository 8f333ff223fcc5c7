"""Candidate and job record loading utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel

from recruitai.matching.models import Candidate, JobListing

T = TypeVar("T", bound=BaseModel)


class RecordLoader:
    """Load candidate and job records from YAML or JSON files."""

    def load_candidate(self, path: Path | str) -> Candidate:
        """Load and validate a candidate record."""
        return self._load(Path(path), Candidate)

    def load_job(self, path: Path | str) -> JobListing:
        """Load and validate a job listing record."""
        return self._load(Path(path), JobListing)

    def _load(self, path: Path, model: type[T]) -> T:
        if not path.is_file():
            raise FileNotFoundError(f"Record not found: {path}")

        suffix = path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            data = self._load_yaml(path)
        elif suffix == ".json":
            data = self._load_json(path)
        else:
            data = self._load_unknown(path)

        return model.model_validate(data)

    def _load_yaml(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML record: {path}") from e

        return self._ensure_mapping(data, path)

    def _load_json(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON record: {path}") from e

        return self._ensure_mapping(data, path)

    def _load_unknown(self, path: Path) -> dict:
        """Auto-detect the format when the file extension is unknown."""
        raw = path.read_text(encoding="utf-8")

        # Try JSON first if it looks like JSON, otherwise fall back to YAML.
        if raw.lstrip().startswith("{"):
            try:
                return self._ensure_mapping(json.loads(raw), path)
            except json.JSONDecodeError:
                pass

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid record format: {path}") from e

        return self._ensure_mapping(data, path)

    @staticmethod
    def _ensure_mapping(data: object, path: Path) -> dict:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Record must be a mapping/dict: {path}")
        return data
