from skillradar.axis_store import AxisStore, default_axes
from skillradar.comment import generate_comment

__all__ = ["AxisStore", "default_axes", "generate_comment"]
