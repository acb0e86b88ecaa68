from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .errors import UnsupportedGenre

Cents = int       # all amounts are whole minor currency units


class Genre(Enum):
    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, raw: str) -> "Genre":
        """Map a genre string from catalog data onto the enum, or fail."""
        try:
            return cls(raw)
        except ValueError:
            raise UnsupportedGenre(raw) from None


@dataclass(frozen=True)
class Play:
    name: str
    genre: str                   # raw value from the catalog, checked when priced


@dataclass(frozen=True)
class Performance:
    play_id: str
    audience: int

    def __post_init__(self):
        # bool is an int subclass but never a head count
        if not isinstance(self.audience, int) or isinstance(self.audience, bool):
            raise TypeError(f"Audience must be a whole number: {self.audience!r}")
        if self.audience < 0:
            raise ValueError(f'Audience cannot be negative: {self.audience}')


@dataclass(frozen=True)
class Invoice:
    customer: str
    performances: Tuple[Performance, ...] = ()

    def __post_init__(self):
        # freeze whatever sequence we were handed, keeping its order
        object.__setattr__(self, 'performances', tuple(self.performances))


@dataclass(frozen=True)
class LineResult:
    amount: Cents
    credits: int


@dataclass(frozen=True)
class LineItem:
    play_name: str
    amount: Cents
    audience: int


@dataclass(frozen=True)
class StatementSummary:
    customer: str
    lines: Tuple[LineItem, ...] = field(default_factory=tuple)
    total_amount: Cents = 0
    total_credits: int = 0
