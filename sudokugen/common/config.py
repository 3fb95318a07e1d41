# -*- coding: utf-8 -*-
"""Configs for puzzle generation."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from omegaconf import OmegaConf

from sudokugen.common.constants import (
    CELL_COUNT,
    DEFAULT_REMOVAL_COUNT,
    LOG_LEVEL_ENV_VAR,
    Difficulty,
    PrintStyle,
)
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration of the full grid generation."""

    seed: Optional[int] = None  # None draws a fresh seed from the OS
    # safety valve on backtracking assignments while filling the full grid,
    # None means no cap. Solvability checks are never capped by it
    max_iterations: Optional[int] = None
    # apply random row/column/band/stack swaps and a rotation after filling
    transform: bool = False


@dataclass
class ReducerConfig:
    """Configuration of the cell removal."""

    # if None, taken from `difficulty`, or DEFAULT_REMOVAL_COUNT without one
    removal_count: Optional[int] = None
    difficulty: Optional[str] = None
    # a name registered in SOLVABILITY_CHECKS or a dotted class path
    solvability_check: str = "any_solution"


@dataclass
class PrinterConfig:
    style: str = PrintStyle.BOXED.value
    # None picks the style default: a blank for `wide`, `.` otherwise
    empty: Optional[str] = None
    show_solution: bool = True


@dataclass
class LogConfig:
    level: str = "INFO"


@dataclass
class Config:
    """Global Configuration"""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    reducer: ReducerConfig = field(default_factory=ReducerConfig)
    printer: PrinterConfig = field(default_factory=PrinterConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def save(self, config_path: str) -> None:
        """Save config to file."""
        with open(config_path, "w", encoding="utf-8") as f:
            OmegaConf.save(self, f)

    def _check_generator(self) -> None:
        max_iterations = self.generator.max_iterations
        if max_iterations is not None and max_iterations <= 0:
            raise ValueError(f"generator.max_iterations should be positive, got {max_iterations}")

    def _check_reducer(self) -> None:
        difficulty = None
        if self.reducer.difficulty is not None:
            try:
                difficulty = Difficulty(self.reducer.difficulty)
            except (KeyError, ValueError):
                raise ValueError(
                    f"Invalid reducer.difficulty: {self.reducer.difficulty}, "
                    f"expected one of {[d.value for d in Difficulty]}"
                )
            self.reducer.difficulty = difficulty.value

        if self.reducer.removal_count is None:
            if difficulty is None:
                self.reducer.removal_count = DEFAULT_REMOVAL_COUNT
                logger.info(
                    f"Neither `reducer.removal_count` nor `reducer.difficulty` is set, "
                    f"use the default of {DEFAULT_REMOVAL_COUNT} removals"
                )
            else:
                self.reducer.removal_count = difficulty.removal_count
                logger.info(
                    f"`reducer.removal_count` is set to {self.reducer.removal_count} "
                    f"from difficulty `{difficulty.value}`"
                )
        elif not 0 <= self.reducer.removal_count <= CELL_COUNT:
            raise ValueError(
                f"reducer.removal_count should be in [0, {CELL_COUNT}], "
                f"got {self.reducer.removal_count}"
            )

        from sudokugen.engine.solvability import SOLVABILITY_CHECKS

        name = self.reducer.solvability_check
        if name not in SOLVABILITY_CHECKS.names() and "." not in name:
            raise ValueError(
                f"Invalid reducer.solvability_check: {name}, "
                f"expected one of {SOLVABILITY_CHECKS.names()} or a dotted class path"
            )

    def _check_printer(self) -> None:
        try:
            self.printer.style = PrintStyle(self.printer.style).value
        except (KeyError, ValueError):
            raise ValueError(
                f"Invalid printer.style: {self.printer.style}, "
                f"expected one of {[s.value for s in PrintStyle]}"
            )
        if self.printer.empty is not None and len(self.printer.empty) != 1:
            raise ValueError(
                f"printer.empty should be a single character, got {self.printer.empty!r}"
            )

    def check_and_update(self) -> Config:
        """Check and update the config."""
        self._check_generator()
        self._check_reducer()
        self._check_printer()

        self.log.level = self.log.level.upper()
        os.environ[LOG_LEVEL_ENV_VAR] = self.log.level
        get_logger(level=self.log.level)
        return self


def load_config(config_path: str) -> Config:
    """Load the configuration from the given path."""
    schema = OmegaConf.structured(Config)
    yaml_config = OmegaConf.load(config_path)
    try:
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
