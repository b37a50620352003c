"""Project configuration loaded from ``[tool.gauntlet]`` in pyproject.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from gauntlet.errors import ConfigError


@dataclass(frozen=True)
class GauntletConfig:
    """Settings for the gauntlet command line.

    Attributes
    ----------
    modules
        Modules to import when no module is given on the command line.
    verbosity
        Baseline verbosity, adjusted by ``-v``/``-q``.
    log_level
        Level for the root logger handler installed by the CLI.
    addopts
        Extra arguments prepended to the command line.
    """

    modules: list[str] = field(default_factory=list)
    verbosity: int = 0
    log_level: str = "WARNING"
    addopts: list[str] = field(default_factory=list)


DEFAULT_CONFIG = GauntletConfig()

_EXPECTED_TYPES: dict[str, type] = {
    "modules": list,
    "verbosity": int,
    "log_level": str,
    "addopts": list,
}


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    directory = (start or Path.cwd()).resolve()
    for candidate in (directory, *directory.parents):
        path = candidate / "pyproject.toml"
        if path.is_file():
            return path
    return None


def _validate(table: dict[str, Any], source: Path) -> dict[str, Any]:
    known = {f.name for f in fields(GauntletConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        msg = f"Unknown [tool.gauntlet] key(s) in {source}: {', '.join(unknown)}"
        raise ConfigError(msg)

    for key, value in table.items():
        expected = _EXPECTED_TYPES[key]
        if not isinstance(value, expected) or isinstance(value, bool):
            msg = f"[tool.gauntlet] {key} in {source} must be {expected.__name__}"
            raise ConfigError(msg)
        if expected is list and not all(isinstance(item, str) for item in value):
            msg = f"[tool.gauntlet] {key} in {source} must be a list of strings"
            raise ConfigError(msg)
    return table


def load_config(start: Path | None = None) -> GauntletConfig:
    """Load configuration from the nearest pyproject.toml, or defaults."""
    path = find_pyproject(start)
    if path is None:
        return DEFAULT_CONFIG

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc

    table = data.get("tool", {}).get("gauntlet")
    if table is None:
        return DEFAULT_CONFIG

    return GauntletConfig(**_validate(table, path))


__all__ = ["DEFAULT_CONFIG", "GauntletConfig", "find_pyproject", "load_config"]
