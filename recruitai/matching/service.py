"""Match scoring service implementation."""

from __future__ import annotations

import math
import re

from recruitai.matching.classifier import (
    LabelPredictor,
    load_classifier,
    resolve_model_path,
)
from recruitai.matching.config import MatchingConfig, get_matching_config
from recruitai.matching.models import Candidate, JobListing, MatchOutcome
from recruitai.matching.text import build_match_input
from recruitai.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SCORE = 0.0

# Plain decimal or exponent notation, no surrounding whitespace or underscores
_NUMERIC_LABEL = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)


def parse_score(label: str | None) -> float | None:
    """Parse a model label as a finite float, or return None."""
    if label is None or not _NUMERIC_LABEL.fullmatch(label):
        return None
    value = float(label)
    if not math.isfinite(value):
        return None
    return value


class MatchScorer:
    """Scores candidate/job pairs with a pre-trained text classifier.

    The model is loaded once, eagerly, when the scorer is constructed. If it
    is missing or unreadable a ``ModelInitializationError`` propagates and
    the scorer is never created; callers are expected to let it end the
    process.

    ``match`` is synchronous and stateless. Concurrent calls on one scorer
    are only as safe as the underlying predictor.
    """

    def __init__(
        self,
        config: MatchingConfig | None = None,
        predictor: LabelPredictor | None = None,
    ) -> None:
        self.config = config or get_matching_config()

        if predictor is None:
            model_path = resolve_model_path(self.config)
            predictor = load_classifier(model_path)
            logger.info("Match model loaded from %s", model_path)

        self._predictor = predictor

    @property
    def predictor(self) -> LabelPredictor:
        return self._predictor

    def _predict(self, candidate: Candidate, job: JobListing) -> tuple[str, str | None]:
        text = build_match_input(
            candidate, job, include_job_fields=self.config.include_job_fields
        )
        return text, self._predictor.predicted_label(text)

    def evaluate(self, candidate: Candidate, job: JobListing) -> MatchOutcome:
        """Score a pair, keeping the raw label and a missing score distinct."""
        text, label = self._predict(candidate, job)

        confidence = None
        probability = getattr(self._predictor, "label_probability", None)
        if label is not None and callable(probability):
            confidence = probability(text, label)

        return MatchOutcome(
            input_text=text,
            label=label,
            score=parse_score(label),
            confidence=confidence,
        )

    def match(self, candidate: Candidate, job: JobListing) -> float:
        """Return the match score for ``candidate`` against ``job``.

        A missing or non-numeric label yields 0.0.
        """
        _, label = self._predict(candidate, job)
        score = parse_score(label)
        if score is None:
            return DEFAULT_SCORE
        return score

