"""Ranking and filtering of candidate programs by qualification score."""

from .pipeline import filter_qualified, score_all
from .drift import ScoreDrift, find_score_drift

__all__ = ["filter_qualified", "score_all", "ScoreDrift", "find_score_drift"]
