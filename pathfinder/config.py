# -*- coding: utf-8 -*-
"""
Engine settings.

Defaults live on EngineConfig; a JSON file can override any subset, and CLI
flags override the file:

    {"default_size": 20, "seed": 3, "carve": true, "algorithm": "a_star"}
"""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidSize, ParseError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineConfig:
    default_size: int = 10              # host "size"; the grid is size+1 per side
    seed: Optional[int] = None          # maze carving RNG seed
    carve: bool = False                 # carve a perfect maze instead of an open grid
    algorithm: str = "bfs"
    log_level: str = "WARNING"
    cell_size: float = 20.0             # pixels per cell for click mapping

    def validate(self) -> "EngineConfig":
        if isinstance(self.default_size, bool) or not isinstance(self.default_size, int) or self.default_size < 1:
            raise InvalidSize(f"default_size must be an integer >= 1, got {self.default_size!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ParseError(f"seed must be an integer or null, got {self.seed!r}")
        if not isinstance(self.algorithm, str) or not isinstance(self.log_level, str):
            raise ParseError("algorithm and log_level must be strings")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ParseError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if not isinstance(self.carve, bool):
            raise ParseError(f"carve must be true or false, got {self.carve!r}")
        if isinstance(self.cell_size, bool) or not isinstance(self.cell_size, (int, float)):
            raise ParseError(f"cell_size must be a number, got {self.cell_size!r}")
        if self.cell_size <= 0:
            raise ParseError("cell_size must be positive")
        from .planners.base import Algorithm  # lazy import
        Algorithm.parse(self.algorithm)
        return self

    def replace(self, **overrides) -> "EngineConfig":
        """Copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes).validate()


def load_config(path: str) -> EngineConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(f"config {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ParseError(f"cannot read config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ParseError(f"config {path} must hold a JSON object")

    known = {f.name for f in dataclasses.fields(EngineConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ParseError(f"unknown config keys in {path}: {unknown}")

    logger.debug("Loaded config from %s: %s", path, raw)
    return EngineConfig(**raw).validate()
