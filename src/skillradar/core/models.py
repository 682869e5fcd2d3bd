from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Axis:
    """One labeled skill dimension of a profile."""

    id: str
    label: str
    value: float          # always normalized into [0, 5] by the store


@dataclass(frozen=True)
class ChartPoint:
    """Single radar vertex handed to the chart renderer."""

    subject: str
    score: float
    full_mark: float = 5.0

    def as_json(self) -> dict:
        return {
            "subject": self.subject,
            "score": self.score,
            "fullMark": self.full_mark,
        }


@dataclass(frozen=True)
class RankedAxis:
    label: str
    value: float


@dataclass(frozen=True)
class CommentReport:
    """Computed parts of a generated comment; `comment.render_report` gives the text."""

    average: str
    highest: RankedAxis
    lowest: RankedAxis
    lines: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    maintain_message: Optional[str] = None


@dataclass(frozen=True)
class Profile:
    """Title plus axis inputs as read from a file or the command line."""

    title: Optional[str]
    axes: List[Tuple[str, object]]
