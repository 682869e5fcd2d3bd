from skillradar.core.models import (  # noqa: F401
    Axis,
    ChartPoint,
    CommentReport,
    Profile,
    RankedAxis,
)

__all__ = [
    "Axis",
    "ChartPoint",
    "CommentReport",
    "Profile",
    "RankedAxis",
]
