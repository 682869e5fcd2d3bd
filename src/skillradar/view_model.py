from __future__ import annotations

from typing import Callable, Dict, List, Literal, Optional

from skillradar.axis_store import AxisStore, Snapshot, default_axes
from skillradar.chart import PLACEHOLDER_LABEL, average_score, chart_points
from skillradar.comment import generate_comment
from skillradar.config import AppConfig
from skillradar.core import Axis, ChartPoint


FieldName = Literal["title", "axes", "comment"]
Subscriber = Callable[[object], None]


class ProfileViewModel:
    """
    Observable view-model for a profile editor.

    Exposes three pieces of state:
      - title: str
      - axes: Tuple[Axis, ...] (the store snapshot)
      - comment: str
    The comment is produced on demand from the axes and then edited freely;
    edits never flow back into the axes.
    """

    def __init__(self, store: Optional[AxisStore] = None, *, config: Optional[AppConfig] = None) -> None:
        cfg = config or AppConfig()
        self.store = store or AxisStore(
            default_axes() if cfg.use_default_axes else (),
            default_label=cfg.new_axis_label,
            default_value=cfg.new_axis_value,
        )
        self.placeholder = cfg.placeholder_label or PLACEHOLDER_LABEL
        self.title: str = cfg.title
        self.comment: str = ""
        self._subscribers: Dict[FieldName, List[Subscriber]] = {
            "title": [],
            "axes": [],
            "comment": [],
        }
        self._axes: Snapshot = self.store.snapshot()
        self.store.subscribe(self._on_axes)

    @property
    def axes(self) -> Snapshot:
        return self._axes

    def subscribe(self, field: FieldName, fn: Subscriber) -> Callable[[], None]:
        """
        Subscribe to a field; returns an unsubscribe callable.
        Invokes the callback immediately with the current value.
        """
        if field not in self._subscribers:
            raise ValueError(f"Unknown field '{field}'")

        self._subscribers[field].append(fn)
        fn(self._get_value(field))

        def unsubscribe() -> None:
            try:
                self._subscribers[field].remove(fn)
            except ValueError:
                pass

        return unsubscribe

    # ---- mutations ----

    def set_title(self, title: str) -> None:
        if title == self.title:
            return
        self.title = title
        self._notify("title")

    def add_axis(self) -> Axis:
        return self.store.add()

    def remove_axis(self, axis_id: str) -> bool:
        return self.store.remove(axis_id)

    def update_label(self, axis_id: str, label: str) -> bool:
        return self.store.update_label(axis_id, label)

    def update_value(self, axis_id: str, value: object) -> bool:
        return self.store.update_value(axis_id, value)

    def generate_comment(self) -> str:
        self.set_comment(generate_comment(self.store.snapshot()))
        return self.comment

    def set_comment(self, text: str) -> None:
        if text == self.comment:
            return
        self.comment = text
        self._notify("comment")

    def chart_points(self) -> List[ChartPoint]:
        return chart_points(self._axes, placeholder=self.placeholder)

    def average(self) -> float:
        return average_score(self._axes)

    # ---- internal ----

    def _on_axes(self, snapshot: Snapshot) -> None:
        if snapshot == self._axes:
            return
        self._axes = snapshot
        self._notify("axes")

    def _notify(self, field: FieldName) -> None:
        value = self._get_value(field)
        for fn in list(self._subscribers[field]):
            fn(value)

    def _get_value(self, field: FieldName):
        if field == "title":
            return self.title
        if field == "axes":
            return self._axes
        if field == "comment":
            return self.comment
        raise ValueError(f"Unknown field '{field}'")
