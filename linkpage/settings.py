"""Load optional build settings from ``linkpage.yaml``.

The settings file lets a project pin its input/output directories and
rendering options instead of repeating CLI flags::

    input_dir: pages
    output_dir: public
    escape_markup: true
    unique_ids: false
    workers: 4

Relative directories are resolved against the folder holding the settings
file. Every key is optional; a missing file yields :class:`BuildSettings`
defaults.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ._constants import SETTINGS_FILENAME


class SettingsError(ValueError):
    """Raised when the settings file is invalid."""


@dc.dataclass(slots=True)
class BuildSettings:
    """Resolved options for one batch build."""

    input_dir: Path = Path(".")
    output_dir: Path = Path("build")
    escape_markup: bool = True
    unique_ids: bool = False
    workers: int = 4

    def with_overrides(self, **overrides: typ.Any) -> BuildSettings:
        """Return a copy with every non-``None`` override applied.

        Raises
        ------
        SettingsError
            If a ``workers`` override is not a positive integer.
        """
        applied = {key: value for key, value in overrides.items() if value is not None}
        _workers(applied, self.workers)
        return dc.replace(self, **applied)


def load_build_settings(path: Path | None = None) -> BuildSettings:
    """Load build settings, falling back to defaults.

    Parameters
    ----------
    path : Path, optional
        Explicit settings file. When ``None``, ``linkpage.yaml`` in the
        working directory is used if present.

    Returns
    -------
    BuildSettings
        Settings with file values applied over the defaults.

    Raises
    ------
    FileNotFoundError
        If an explicit ``path`` does not exist.
    SettingsError
        If the document is not a mapping or a value has the wrong type.
    """
    if path is None:
        path = Path(SETTINGS_FILENAME)
        if not path.exists():
            return BuildSettings()
    elif not path.exists():
        msg = f"Settings file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Settings file '{path}' must contain a mapping."
        raise SettingsError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    unknown = sorted(set(raw) - {field.name for field in dc.fields(BuildSettings)})
    if unknown:
        msg = f"Unknown settings in '{path}': {', '.join(unknown)}"
        raise SettingsError(msg)

    base = path.parent
    defaults = BuildSettings()
    return BuildSettings(
        input_dir=_directory(raw, "input_dir", base, defaults.input_dir),
        output_dir=_directory(raw, "output_dir", base, defaults.output_dir),
        escape_markup=_flag(raw, "escape_markup", defaults.escape_markup),
        unique_ids=_flag(raw, "unique_ids", defaults.unique_ids),
        workers=_workers(raw, defaults.workers),
    )


def _directory(
    raw: typ.Mapping[str, typ.Any], key: str, base: Path, default: Path
) -> Path:
    match raw.get(key):
        case None:
            return default
        case str() as text if text.strip():
            candidate = Path(text.strip())
            return candidate if candidate.is_absolute() else base / candidate
        case other:
            msg = f"Setting '{key}' must be a non-empty path string, got {other!r}."
            raise SettingsError(msg)


def _flag(raw: typ.Mapping[str, typ.Any], key: str, default: bool) -> bool:
    match raw.get(key):
        case None:
            return default
        case bool() as value:
            return value
        case other:
            msg = f"Setting '{key}' must be true or false, got {other!r}."
            raise SettingsError(msg)


def _workers(raw: typ.Mapping[str, typ.Any], default: int) -> int:
    match raw.get("workers"):
        case None:
            return default
        case bool():
            pass
        case int() as value if value > 0:
            return value
    msg = f"Setting 'workers' must be a positive integer, got {raw['workers']!r}."
    raise SettingsError(msg)


__all__ = ["BuildSettings", "SettingsError", "load_build_settings"]
