from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class FlagLevel(str, Enum):
    BAD = "bad"
    WARN = "warn"
    INFO = "info"


_SEVERITY_ORDER = {FlagLevel.INFO: 0, FlagLevel.WARN: 1, FlagLevel.BAD: 2}


@dataclass(frozen=True)
class Flag:
    level: FlagLevel
    message: str

    @classmethod
    def bad(cls, message: str) -> "Flag":
        return cls(FlagLevel.BAD, message)

    @classmethod
    def warn(cls, message: str) -> "Flag":
        return cls(FlagLevel.WARN, message)

    @classmethod
    def info(cls, message: str) -> "Flag":
        return cls(FlagLevel.INFO, message)

    def to_dict(self) -> dict:
        return {"level": self.level.value, "message": self.message}


def worst_level(flags: Iterable[Flag]) -> FlagLevel | None:
    worst = None
    for flag in flags:
        if worst is None or _SEVERITY_ORDER[flag.level] > _SEVERITY_ORDER[worst]:
            worst = flag.level
    return worst


def has_blocking(flags: Iterable[Flag]) -> bool:
    return worst_level(flags) is FlagLevel.BAD
