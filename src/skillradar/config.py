from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

try:  # Python <3.11 fallback
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - fallback path
    import tomli as tomllib  # type: ignore

import yaml

from skillradar.axis_store import DEFAULT_NEW_LABEL, DEFAULT_NEW_VALUE
from skillradar.chart import PLACEHOLDER_LABEL
from skillradar.scoring import SCORE_MAX, SCORE_MIN

DEFAULT_TITLE = "My skill profile"


def _load_pyproject_config(project_root: Path) -> Dict[str, Any]:
    pyproject_path = project_root / "pyproject.toml"
    if not pyproject_path.exists():
        return {}

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("skillradar", {}) or {}


def _ensure_mapping(obj: Any, ctx: str) -> Dict[str, Any]:
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise ValueError(f"{ctx} must be a mapping/object")
    return obj


def _load_override_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config override not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        return _ensure_mapping(json.loads(path.read_text(encoding="utf-8")), "JSON config")
    if suffix in {".yaml", ".yml"}:
        return _ensure_mapping(yaml.safe_load(path.read_text(encoding="utf-8")), "YAML config")
    if suffix == ".toml":
        with path.open("rb") as f:
            return _ensure_mapping(tomllib.load(f), "TOML config")

    raise ValueError(f"Unsupported config override format: {path}")


@dataclass(frozen=True)
class AppConfig:
    title: str = DEFAULT_TITLE
    new_axis_label: str = DEFAULT_NEW_LABEL
    new_axis_value: float = DEFAULT_NEW_VALUE
    placeholder_label: str = PLACEHOLDER_LABEL
    use_default_axes: bool = True

    def validate(self, *, strict: bool = True) -> Dict[str, str]:
        issues: Dict[str, str] = {}

        for label in ("title", "new_axis_label", "placeholder_label"):
            if not isinstance(getattr(self, label), str):
                issues[label] = f"{label} must be a string"

        value = self.new_axis_value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            issues["new_axis_value"] = f"new_axis_value must be a number, got {value!r}"
        elif not SCORE_MIN <= value <= SCORE_MAX:
            issues["new_axis_value"] = f"new_axis_value must be within [{SCORE_MIN}, {SCORE_MAX}], got {value}"

        if not isinstance(self.use_default_axes, bool):
            issues["use_default_axes"] = "use_default_axes must be a bool"

        if strict and issues:
            details = "\n- ".join(f"{k}: {v}" for k, v in issues.items())
            raise ValueError("Config validation failed:\n- " + details)
        return issues

    @classmethod
    def _from_map(cls, top: Mapping[str, Any]) -> "AppConfig":
        use_defaults = top.get("use_default_axes")
        return cls(
            title=top.get("title", DEFAULT_TITLE),
            new_axis_label=top.get("new_axis_label", DEFAULT_NEW_LABEL),
            new_axis_value=top.get("new_axis_value", DEFAULT_NEW_VALUE),
            placeholder_label=top.get("placeholder_label", PLACEHOLDER_LABEL),
            use_default_axes=True if use_defaults is None else use_defaults,
        )


def load_app_config(*, project_root: Optional[Path] = None, override_path: Optional[Path] = None) -> AppConfig:
    root = Path(project_root) if project_root else Path.cwd()

    base = _load_pyproject_config(root)
    override = _load_override_file(override_path) if override_path else {}

    top = dict(base)
    top.update(override)
    return AppConfig._from_map(top)
