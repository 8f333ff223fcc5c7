"""Candidate/job match scoring.

Public API:
    - MatchScorer: Loads the bundled classifier and scores candidate/job pairs
    - Candidate, JobListing: Immutable input records
    - MatchOutcome: Detailed evaluation output
    - RecordLoader: Load records from YAML or JSON files
    - MatchingConfig: Configuration settings
"""

from recruitai.matching.classifier import (
    JoblibTextClassifier,
    LabelPredictor,
    ModelInitializationError,
    ModelLoadError,
    ModelNotFoundError,
)
from recruitai.matching.config import (
    MatchingConfig,
    get_matching_config,
    reset_matching_config,
)
from recruitai.matching.models import Candidate, JobListing, MatchOutcome
from recruitai.matching.records import RecordLoader
from recruitai.matching.service import MatchScorer, parse_score

__all__ = [
    "MatchScorer",
    "parse_score",
    "Candidate",
    "JobListing",
    "MatchOutcome",
    "RecordLoader",
    "LabelPredictor",
    "JoblibTextClassifier",
    "ModelInitializationError",
    "ModelNotFoundError",
    "ModelLoadError",
    "MatchingConfig",
    "get_matching_config",
    "reset_matching_config",
]
