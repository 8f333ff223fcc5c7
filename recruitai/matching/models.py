"""Data models for match scoring."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Self
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Shared encode/decode behaviour for immutable records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)

    def to_json(self) -> str:
        """Serialize to JSON text."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Deserialize from JSON text."""
        return cls.model_validate_json(text)

    def save_json(self, path: Path | str) -> None:
        """Save the record to a JSON file.

        Args:
            path: Path to the output JSON file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


class Candidate(_Record):
    """A job applicant.

    Fields are set once at creation. No range checks are applied, so an
    empty name or negative experience is accepted as given.
    """

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    name: str = Field(..., description="Candidate full name")
    skills: tuple[str, ...] = Field(
        default_factory=tuple, description="Ordered list of skill names"
    )
    experience: int = Field(..., description="Years of experience")


class JobListing(_Record):
    """An open position."""

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    title: str = Field(..., description="Job title")
    required_skills: tuple[str, ...] = Field(
        default_factory=tuple,
        alias="requiredSkills",
        description="Ordered list of required skill names",
    )
    min_experience: int = Field(
        ..., alias="minExperience", description="Minimum years of experience"
    )


@dataclass
class MatchOutcome:
    """Detailed result of a single match evaluation."""

    input_text: str
    label: str | None
    score: float | None
    confidence: float | None = None

    @property
    def has_score(self) -> bool:
        """Whether the model produced a numeric label."""
        return self.score is not None
