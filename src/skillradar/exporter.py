# exporter.py
from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Sequence

from skillradar.chart import PLACEHOLDER_LABEL, chart_points
from skillradar.comment import generate_comment
from skillradar.core import Axis, ChartPoint
from skillradar.scoring import format_average, format_score, normalize_value


@dataclass(frozen=True)
class ProfileExport:
    title: str
    points: List[ChartPoint]
    average: str
    comment: str


class ExportError(Exception):
    """Raised when export preconditions fail (e.g., no axes)."""


def build_export(
    title: str,
    axes: Sequence[Axis],
    *,
    placeholder: str = PLACEHOLDER_LABEL,
) -> ProfileExport:
    if not axes:
        raise ExportError("no axes to export")

    return ProfileExport(
        title=title,
        points=chart_points(axes, placeholder=placeholder),
        average=format_average(normalize_value(a.value) for a in axes),
        comment=generate_comment(axes),
    )


def _csv_rows(result: ProfileExport) -> List[List[str]]:
    rows: List[List[str]] = []

    rows.append(["[Profile]"])
    rows.append(["title", result.title])
    rows.append(["average", result.average])
    rows.append([])

    rows.append(["[Axes]"])
    for p in result.points:
        rows.append([p.subject, format_score(p.score), format_score(p.full_mark)])
    rows.append([])

    # one line per row so spreadsheets keep the layout
    rows.append(["[Comment]"])
    for line in result.comment.rstrip("\n").split("\n"):
        rows.append([line])
    return rows


def write_csv(result: ProfileExport, path: Path) -> None:
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as f:
        write_csv_stream(result, f)


def write_csv_stream(result: ProfileExport, stream: IO[str]) -> None:
    csv.writer(stream).writerows(_csv_rows(result))


def export_to_json(result: ProfileExport) -> dict:
    return {
        "title": result.title,
        "average": result.average,
        "axes": [p.as_json() for p in result.points],
        "comment": result.comment,
    }
