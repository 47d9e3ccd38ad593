"""Metric result model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MetricStatus(Enum):
    """How a metric value came about."""

    VALID = "valid"  # measured value, may legitimately be 0 or negative
    DEGENERATE = "degenerate"  # geometric degeneracy detected, value is 0.0
    INVALID_INPUT = "invalid_input"  # not five 3-D points, value is 0.0


@dataclass(frozen=True)
class MetricOutcome:
    """A single metric evaluation."""

    value: float
    status: MetricStatus = MetricStatus.VALID
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is MetricStatus.VALID

    def __float__(self) -> float:
        return self.value

    @classmethod
    def degenerate(cls, reason: str) -> "MetricOutcome":
        return cls(0.0, MetricStatus.DEGENERATE, reason)

    @classmethod
    def invalid_input(cls, reason: str = "expected 5 points with 3 coordinates") -> "MetricOutcome":
        return cls(0.0, MetricStatus.INVALID_INPUT, reason)
