"""Text classifier used for match scoring.

The classifier is a pre-trained scikit-learn text pipeline persisted with
joblib and bundled under ``recruitai/matching/resources``. Scoring code only
depends on the :class:`LabelPredictor` protocol, so tests can inject a fake.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import joblib

from recruitai.matching.config import MatchingConfig
from recruitai.utils.logging import get_logger

logger = get_logger(__name__)

RESOURCE_DIR = Path(__file__).parent / "resources"


class ModelInitializationError(Exception):
    """Raised when the classification model cannot be made ready."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class ModelNotFoundError(ModelInitializationError):
    """Raised when the model resource does not exist."""


class ModelLoadError(ModelInitializationError):
    """Raised when the model resource exists but cannot be loaded."""


@runtime_checkable
class LabelPredictor(Protocol):
    """Anything that maps input text to its best-guess label."""

    def predicted_label(self, text: str) -> str | None: ...


class JoblibTextClassifier:
    """Single-label predictor over a scikit-learn compatible text pipeline.

    Thread safety is that of the wrapped pipeline. Fitted scikit-learn
    pipelines are safe for concurrent ``predict`` calls; anything else needs
    external locking.
    """

    def __init__(self, pipeline: Any, *, source: Path | None = None) -> None:
        self.pipeline = pipeline
        self.source = source

    def predicted_label(self, text: str) -> str | None:
        """Return the most likely label for ``text``, or None."""
        if not text or not text.strip():
            return None

        predictions = self.pipeline.predict([text])
        if len(predictions) == 0:
            return None

        prediction = predictions[0]
        if prediction is None:
            return None

        label = str(prediction)
        return label if label.strip() else None

    def label_hypotheses(self, text: str, maximum: int = 1) -> dict[str, float]:
        """Return up to ``maximum`` labels with their probabilities.

        Empty when the pipeline does not expose ``predict_proba``.
        """
        if maximum < 1 or not text or not text.strip():
            return {}
        if not hasattr(self.pipeline, "predict_proba"):
            return {}

        probabilities = self.pipeline.predict_proba([text])[0]
        classes = self.pipeline.classes_
        ranked = sorted(
            zip(classes, probabilities), key=lambda item: item[1], reverse=True
        )
        return {str(label): float(prob) for label, prob in ranked[:maximum]}

    def label_probability(self, text: str, label: str) -> float | None:
        """Return the probability the pipeline assigns to ``label``.

        Looked up across every class, so it is available even when
        ``predict`` and ``predict_proba`` disagree on the top class.
        """
        if not text or not text.strip():
            return None
        if not hasattr(self.pipeline, "predict_proba"):
            return None

        probabilities = self.pipeline.predict_proba([text])[0]
        for candidate_label, prob in zip(self.pipeline.classes_, probabilities):
            if str(candidate_label) == label:
                return float(prob)
        return None


def resolve_model_path(config: MatchingConfig) -> Path:
    """Return the model file location for ``config``.

    An explicit ``model_path`` wins; otherwise the bundled resource named
    ``<model_name><model_suffix>`` is used.
    """
    if config.model_path is not None:
        return Path(config.model_path)
    return RESOURCE_DIR / f"{config.model_name}{config.model_suffix}"


def load_classifier(path: Path | str) -> JoblibTextClassifier:
    """Load a persisted text pipeline.

    Raises:
        ModelNotFoundError: If ``path`` does not exist.
        ModelLoadError: If the file cannot be deserialized or is not a
            predictor.
    """
    path = Path(path)
    if not path.is_file():
        raise ModelNotFoundError(f"Model not found: {path}")

    try:
        pipeline = joblib.load(path)
    except Exception as e:
        raise ModelLoadError(f"Failed to load model: {e}", e) from e

    if not callable(getattr(pipeline, "predict", None)):
        raise ModelLoadError(
            f"Failed to load model: {path} does not contain a predictor "
            f"(got {type(pipeline).__name__})"
        )

    logger.debug("Loaded %s from %s", type(pipeline).__name__, path)
    return JoblibTextClassifier(pipeline, source=path)
