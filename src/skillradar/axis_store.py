from __future__ import annotations

import itertools
import logging
import threading
import uuid
from dataclasses import replace
from typing import Callable, Iterable, Iterator, List, Optional, Set, Tuple, Union

from skillradar.core import Axis
from skillradar.scoring import normalize_value

logger = logging.getLogger(__name__)

DEFAULT_NEW_LABEL = "New item"
DEFAULT_NEW_VALUE = 3

IdFactory = Callable[[], str]
AxisInput = Union[Axis, Tuple[str, object]]
Snapshot = Tuple[Axis, ...]
Subscriber = Callable[[Snapshot], None]


def counter_id_factory(prefix: str = "axis") -> IdFactory:
    """Deterministic ids: axis-1, axis-2, ..."""
    counter = itertools.count(1)

    def next_id() -> str:
        return f"{prefix}-{next(counter)}"

    return next_id


def uuid_id_factory() -> IdFactory:
    def next_id() -> str:
        return uuid.uuid4().hex

    return next_id


def default_axes() -> List[Tuple[str, int]]:
    """Fresh starting profile for a new editing session."""
    return [
        ("Speed", 3),
        ("Accuracy", 4),
        ("Creativity", 3),
        ("Persistence", 4),
        ("Teamwork", 3),
    ]


class AxisStore:
    """
    Authoritative ordered collection of axes.

    State is an immutable tuple that every mutation replaces wholesale under a
    lock, so `snapshot()` never sees a half-applied change. Unknown ids are
    no-ops; every value is normalized into [0, 5] on the way in.
    """

    def __init__(
        self,
        axes: Optional[Iterable[AxisInput]] = None,
        *,
        id_factory: Optional[IdFactory] = None,
        default_label: str = DEFAULT_NEW_LABEL,
        default_value: object = DEFAULT_NEW_VALUE,
    ) -> None:
        self._next_id = id_factory or counter_id_factory()
        self._default_label = default_label
        self._default_value = normalize_value(default_value)
        self._lock = threading.RLock()
        self._subscribers: List[Subscriber] = []
        # every id this store has handed out or accepted; never minted again
        self._issued: Set[str] = set()
        self._axes: Snapshot = tuple(self._make_axis(item) for item in (axes or ()))

    # ---- reads ----

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._axes

    def get(self, axis_id: str) -> Optional[Axis]:
        for axis in self.snapshot():
            if axis.id == axis_id:
                return axis
        return None

    def __len__(self) -> int:
        return len(self.snapshot())

    def __iter__(self) -> Iterator[Axis]:
        return iter(self.snapshot())

    def subscribe(self, fn: Subscriber) -> Callable[[], None]:
        """
        Subscribe to snapshot changes; returns an unsubscribe callable.
        Invokes the callback immediately with the current snapshot.
        """
        with self._lock:
            self._subscribers.append(fn)
        fn(self.snapshot())

        def unsubscribe() -> None:
            with self._lock:
                try:
                    self._subscribers.remove(fn)
                except ValueError:
                    pass

        return unsubscribe

    # ---- mutations ----

    def add(self) -> Axis:
        with self._lock:
            axis = Axis(id=self._fresh_id(), label=self._default_label, value=self._default_value)
            self._publish(self._axes + (axis,))
        logger.debug("added axis %s", axis.id)
        return axis

    def remove(self, axis_id: str) -> bool:
        with self._lock:
            kept = tuple(a for a in self._axes if a.id != axis_id)
            if len(kept) == len(self._axes):
                return False
            self._publish(kept)
        logger.debug("removed axis %s", axis_id)
        return True

    def update_label(self, axis_id: str, new_label: str) -> bool:
        return self._update(axis_id, label=new_label)

    def update_value(self, axis_id: str, new_value: object) -> bool:
        return self._update(axis_id, value=normalize_value(new_value))

    # ---- internal ----

    def _fresh_id(self) -> str:
        axis_id = self._next_id()
        while axis_id in self._issued:
            axis_id = self._next_id()
        self._issued.add(axis_id)
        return axis_id

    def _make_axis(self, item: AxisInput) -> Axis:
        if isinstance(item, Axis):
            # keep a caller-supplied id unless an earlier axis already holds it
            axis_id = item.id
            if axis_id in self._issued:
                axis_id = self._fresh_id()
            else:
                self._issued.add(axis_id)
            return replace(item, id=axis_id, value=normalize_value(item.value))
        label, value = item
        return Axis(id=self._fresh_id(), label=str(label), value=normalize_value(value))

    def _update(self, axis_id: str, **changes) -> bool:
        with self._lock:
            for idx, axis in enumerate(self._axes):
                if axis.id == axis_id:
                    break
            else:
                return False
            updated = list(self._axes)
            updated[idx] = replace(axis, **changes)
            self._publish(tuple(updated))
        logger.debug("updated axis %s: %s", axis_id, sorted(changes))
        return True

    def _publish(self, axes: Snapshot) -> None:
        self._axes = axes
        for fn in list(self._subscribers):
            fn(axes)
