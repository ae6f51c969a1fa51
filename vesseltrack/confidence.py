"""Scoring of draught measurements against a confidence interval."""

from __future__ import annotations

ConfidenceInterval = tuple[float, float]


def deviation_from_confidence(draught: float, confidence: ConfidenceInterval) -> float:
    """Distance from ``draught`` to the inclusive interval; zero when inside it."""
    start, end = confidence
    if start <= draught <= end:
        return 0.0
    if draught < start:
        return start - draught
    return draught - end


def score_deviation(draught: float, confidence: ConfidenceInterval) -> float:
    """Squared deviation of ``draught`` from the interval."""
    return deviation_from_confidence(draught, confidence) ** 2