"""Comment generator: turns an axis snapshot into a sectioned text report.

The output depends only on labels, values and their order. Axis ids are never
read, so two snapshots with the same content render byte-identical text.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Tuple

from skillradar.core import Axis, CommentReport, RankedAxis
from skillradar.scoring import format_average, format_score, normalize_value, tier_label

logger = logging.getLogger(__name__)

SUGGESTION_LIMIT = 3
SUGGESTION_BELOW = 4

SUMMARY_HEADING = "[Summary]"
BREAKDOWN_HEADING = "[Breakdown]"
NEXT_STEPS_HEADING = "[Next steps]"

BULLET_TEMPLATE = "・{label}: {score} ({tier})"
SUGGESTION_TEMPLATE = '- Build a weekly practice or review habit to improve "{label}".'
MAINTAIN_MESSAGE = "Keep up the current level. Push your strengths even further."
SUMMARY_TEMPLATE = (
    'The average score is {average}. "{high}" stands out as a strength ({high_score}). '
    'On the other hand, "{low}" is a relative weakness ({low_score}).'
)


def _label_and_value(item: object) -> Tuple[str, object]:
    if isinstance(item, Axis):
        return item.label, item.value
    if isinstance(item, Mapping):
        return str(item.get("label", "")), item.get("value")
    label, value = item  # type: ignore[misc]
    return str(label), value


def _normalized(axes: Iterable[object]) -> List[RankedAxis]:
    out: List[RankedAxis] = []
    for item in axes:
        label, value = _label_and_value(item)
        out.append(RankedAxis(label=label, value=normalize_value(value)))
    return out


def _first_extremes(items: List[RankedAxis]) -> Tuple[RankedAxis, RankedAxis]:
    # strict comparisons keep the earliest axis on ties
    highest = lowest = items[0]
    for item in items[1:]:
        if item.value > highest.value:
            highest = item
        if item.value < lowest.value:
            lowest = item
    return highest, lowest


def build_report(axes: Iterable[object]) -> Optional[CommentReport]:
    """Compute the comment parts; None for an empty collection."""
    items = _normalized(axes)
    if not items:
        return None

    highest, lowest = _first_extremes(items)
    lines = tuple(
        BULLET_TEMPLATE.format(label=i.label, score=format_score(i.value), tier=tier_label(i.value))
        for i in items
    )
    weak = [i for i in items if i.value < SUGGESTION_BELOW][:SUGGESTION_LIMIT]
    suggestions = tuple(SUGGESTION_TEMPLATE.format(label=i.label) for i in weak)

    return CommentReport(
        average=format_average(i.value for i in items),
        highest=highest,
        lowest=lowest,
        lines=lines,
        suggestions=suggestions,
        maintain_message=None if suggestions else MAINTAIN_MESSAGE,
    )


def render_report(report: CommentReport) -> str:
    summary = SUMMARY_TEMPLATE.format(
        average=report.average,
        high=report.highest.label,
        high_score=format_score(report.highest.value),
        low=report.lowest.label,
        low_score=format_score(report.lowest.value),
    )
    next_steps = "\n".join(report.suggestions) if report.suggestions else report.maintain_message

    sections = [
        f"{SUMMARY_HEADING}\n{summary}",
        BREAKDOWN_HEADING + "\n" + "\n".join(report.lines),
        f"{NEXT_STEPS_HEADING}\n{next_steps}",
    ]
    return "\n\n".join(sections) + "\n"


def generate_comment(axes: Iterable[object]) -> str:
    """
    Generate the comment text for a snapshot.

    Accepts Axis records, mappings with label/value keys, or (label, value)
    pairs. Returns "" for an empty collection.
    """
    report = build_report(axes)
    if report is None:
        return ""
    text = render_report(report)
    logger.debug("generated comment for %d axes (average %s)", len(report.lines), report.average)
    return text
