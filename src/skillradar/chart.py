from __future__ import annotations

from typing import Iterable, List

from skillradar.core import Axis, ChartPoint
from skillradar.scoring import SCORE_MAX, mean, normalize_value

PLACEHOLDER_LABEL = "Untitled"


def display_label(label: str, placeholder: str = PLACEHOLDER_LABEL) -> str:
    return label if label and label.strip() else placeholder


def chart_points(axes: Iterable[Axis], *, placeholder: str = PLACEHOLDER_LABEL) -> List[ChartPoint]:
    """Map a snapshot to radar vertices, in collection order."""
    return [
        ChartPoint(
            subject=display_label(a.label, placeholder),
            score=normalize_value(a.value),
            full_mark=float(SCORE_MAX),
        )
        for a in axes
    ]


def average_score(axes: Iterable[Axis]) -> float:
    return mean([normalize_value(a.value) for a in axes])
