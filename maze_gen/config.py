#Run configuration: defaults, an optional config.toml, then command line overrides on top

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .algorithms import DEFAULT_ALGORITHM, get_generator
from .errors import ConfigError, UnknownAlgorithmError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.toml"


def clamp_unit(value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Expected a number between 0 and 1, got {value!r}") from None
    return max(0.0, min(1.0, number))


def parse_hex_color(value: str) -> Tuple[int, int, int]:
    #Accepts "#RRGGBB", "RRGGBB" and the short "#RGB" form
    if not isinstance(value, str):
        raise ConfigError(f"Invalid hex color: {value!r}")
    text = value.strip().lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise ConfigError(f"Invalid hex color: {value!r}")
    try:
        return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
    except ValueError:
        raise ConfigError(f"Invalid hex color: {value!r}") from None


def _require_type(key: str, value: Any, expected: type) -> None:
    #bool is an int subclass, TOML true/false is never a valid size or seed
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ConfigError(f"{key} must be {expected.__name__}, got {value!r}")


def solved_output_path(output: str) -> str:
    if output.endswith(".png"):
        return output[: -len(".png")] + "_solved.png"
    return f"{output}_solved.png"


@dataclass
class Config:
    width: int = 50
    height: int = 50
    algorithm: str = DEFAULT_ALGORITHM
    complexity: float = 0.5
    output: str = "maze.png"
    cell_size: int = 10
    seed: Optional[int] = None
    line_color: str = "#FF0000"
    line_thickness: Optional[float] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        for key in ("width", "height", "cell_size"):
            _require_type(key, getattr(self, key), int)
        for key in ("algorithm", "output"):
            _require_type(key, getattr(self, key), str)
        if self.seed is not None:
            _require_type("seed", self.seed, int)
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"Maze must be at least 1x1, got {self.width}x{self.height}")
        if self.cell_size < 1:
            raise ConfigError(f"cell_size must be positive, got {self.cell_size}")
        try:
            self.algorithm = get_generator(self.algorithm).name
        except UnknownAlgorithmError as exc:
            raise ConfigError(str(exc)) from None
        self.complexity = clamp_unit(self.complexity)
        if self.line_thickness is not None:
            self.line_thickness = clamp_unit(self.line_thickness)
        parse_hex_color(self.line_color)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "Config":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in values.items() if key in known})

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as exc:
            raise ConfigError(f"Failed to read config file: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Failed to parse config file: {exc}") from exc
        try:
            return cls.from_dict(data)
        except TypeError as exc:
            raise ConfigError(f"Bad value in config file: {exc}") from exc

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> "Config":
        #Missing file means defaults, a broken file means defaults plus a warning
        path = Path(path or DEFAULT_CONFIG_PATH)
        if not path.exists():
            return cls()
        try:
            return cls.from_file(path)
        except ConfigError as exc:
            logger.warning("%s. Using defaults.", exc)
            return cls()

    def with_overrides(self, **overrides: Any) -> "Config":
        #None means "not given on the command line"
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})

    @property
    def line_rgb(self) -> Tuple[int, int, int]:
        return parse_hex_color(self.line_color)

    @property
    def solved_output(self) -> str:
        return solved_output_path(self.output)
