"""RecruitAI: candidate/job match scoring backed by a bundled text classifier."""

__version__ = "0.1.0"
