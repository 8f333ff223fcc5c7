"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


class FakePredictor:
    """Predictor stub returning canned labels and recording its inputs."""

    def __init__(self, label: str | None = None) -> None:
        self.label = label
        self.calls: list[str] = []

    def predicted_label(self, text: str) -> str | None:
        self.calls.append(text)
        return self.label


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch):
    """Keep config and logging state from leaking between tests."""
    from recruitai.config.settings import reset_settings
    from recruitai.matching.config import reset_matching_config
    from recruitai.utils.logging import reset_logging

    for var in (
        "LOG_LEVEL",
        "MATCHING_MODEL_NAME",
        "MATCHING_MODEL_SUFFIX",
        "MATCHING_MODEL_PATH",
        "MATCHING_INCLUDE_JOB_FIELDS",
    ):
        monkeypatch.delenv(var, raising=False)

    reset_settings()
    reset_matching_config()
    reset_logging()
    yield
    reset_settings()
    reset_matching_config()
    reset_logging()


@pytest.fixture
def fake_predictor_factory():
    """Build a FakePredictor returning the given label."""
    return FakePredictor


@pytest.fixture
def sample_candidate():
    """Candidate used across scoring tests."""
    from recruitai.matching.models import Candidate

    return Candidate(name="Ana", skills=["Go", "SQL"], experience=3)


@pytest.fixture
def sample_job():
    """Job listing used across scoring tests."""
    from recruitai.matching.models import JobListing

    return JobListing(
        title="Backend Engineer",
        required_skills=["Go", "Kubernetes"],
        min_experience=2,
    )


@pytest.fixture
def matching_config(tmp_path):
    """Matching config isolated from the environment and .env files."""
    from recruitai.matching.config import MatchingConfig

    return MatchingConfig(_env_file=None, model_path=tmp_path / "missing.joblib")  # type: ignore[call-arg]


@pytest.fixture
def trained_model_path(tmp_path):
    """Persist a tiny fitted text pipeline whose labels are numeric strings."""
    import joblib
    from sklearn.feature_extraction.text import TfidfVectorizer
    from sklearn.neighbors import KNeighborsClassifier
    from sklearn.pipeline import Pipeline

    texts = [
        "Ana Go, SQL 3",
        "Bruno Excel, Word 1",
        "Chen Python, Kubernetes, Go 7",
        "Dana nursing 0",
    ]
    labels = ["0.85", "0.2", "0.95", "unknown"]

    pipeline = Pipeline(
        [
            ("tfidf", TfidfVectorizer()),
            ("knn", KNeighborsClassifier(n_neighbors=1)),
        ]
    )
    pipeline.fit(texts, labels)

    path = tmp_path / "JobMatchingModel.joblib"
    joblib.dump(pipeline, path)
    return path
