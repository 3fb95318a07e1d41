# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

# grid geometry

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
EMPTY = 0
DIGITS = frozenset(range(1, GRID_SIZE + 1))

# removal count used when neither a count nor a difficulty is requested
DEFAULT_REMOVAL_COUNT = 50

# env var names
LOG_LEVEL_ENV_VAR = "SUDOKUGEN_LOG_LEVEL"  # global log level


# enumerate types


class CaseInsensitiveEnumMeta(EnumMeta):
    name_aliases = {}

    def __getitem__(cls, name):
        name = cls.name_aliases.get(name.lower(), name)
        return super().__getitem__(name.upper())

    def __getattr__(cls, name):
        if not name.startswith("_"):
            return cls[name.upper()]
        return super().__getattr__(name)

    def __call__(cls, value, *args, **kwargs):
        value = cls.name_aliases.get(value.lower(), value)
        return super().__call__(value.lower(), *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class Difficulty(CaseInsensitiveEnum):
    """Named removal counts."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def removal_count(self) -> int:
        return {
            "easy": CELL_COUNT // 3,
            "medium": CELL_COUNT // 2,
            "hard": CELL_COUNT * 2 // 3,
        }[self.value]


class PrintStyle(CaseInsensitiveEnum):
    """Text layouts of the grid printer."""

    PLAIN = "plain"  # digits separated by a space
    BOXED = "boxed"  # plain + box separators
    WIDE = "wide"  # 4-character right aligned columns, blanks for empty cells
