from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

import yaml

from skillradar.axis_store import AxisStore, IdFactory, default_axes
from skillradar.comment import generate_comment
from skillradar.config import AppConfig
from skillradar.core import Profile

Pathish = Union[str, Path]


class ProfileLoadError(ValueError):
    """Raised when a profile file or axis token cannot be read."""


def parse_axis_token(token: str) -> Tuple[str, str]:
    """
    "Label=value" -> ("Label", "value").
    The value stays raw; the store coerces it. The label may contain '='.
    """
    label, sep, value = token.rpartition("=")
    if not sep:
        raise ProfileLoadError(f"Axis must look like Label=value: {token!r}")
    return label.strip(), value.strip()


def _axes_from_list(items: Any, ctx: str) -> List[Tuple[str, object]]:
    if not isinstance(items, list):
        raise ProfileLoadError(f"{ctx}: axes must be a list")
    out: List[Tuple[str, object]] = []
    for item in items:
        if not isinstance(item, dict):
            raise ProfileLoadError(f"{ctx}: invalid axis entry {item!r}")
        label = item.get("label")
        out.append(("" if label is None else str(label), item.get("value")))
    return out


def load_profile(path: Pathish) -> Profile:
    """
    Read a JSON or YAML profile.

    Either a list of {"label", "value"} objects, or an object
    {"title": ..., "axes": [...]}.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProfileLoadError(f"Could not read profile: {path}: {e}") from e

    suffix = path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ProfileLoadError(f"Invalid profile file {path}: {e}") from e

    if isinstance(data, list):
        return Profile(title=None, axes=_axes_from_list(data, str(path)))
    if isinstance(data, dict):
        title = data.get("title")
        return Profile(
            title=None if title is None else str(title),
            axes=_axes_from_list(data.get("axes", []), str(path)),
        )
    raise ProfileLoadError(f"{path}: profile must be a list or an object")


def collect_profile(
    tokens: Sequence[str] = (),
    *,
    from_path: Optional[Pathish] = None,
    app_config: Optional[AppConfig] = None,
    use_defaults: bool = False,
) -> Profile:
    """Merge file axes (first) and command-line tokens (after) into one profile."""
    cfg = app_config or AppConfig()
    title = cfg.title
    axes: List[Tuple[str, object]] = []

    if use_defaults:
        axes.extend(default_axes())
    if from_path is not None:
        loaded = load_profile(from_path)
        if loaded.title is not None:
            title = loaded.title
        axes.extend(loaded.axes)
    axes.extend(parse_axis_token(t) for t in tokens)
    return Profile(title=title, axes=axes)


def store_from_profile(
    profile: Profile,
    *,
    app_config: Optional[AppConfig] = None,
    id_factory: Optional[IdFactory] = None,
) -> AxisStore:
    cfg = app_config or AppConfig()
    return AxisStore(
        profile.axes,
        id_factory=id_factory,
        default_label=cfg.new_axis_label,
        default_value=cfg.new_axis_value,
    )


def comment_for(axes: Iterable[Tuple[str, object]]) -> str:
    """Comment text for raw (label, value) pairs."""
    return generate_comment(AxisStore(axes).snapshot())
