"""Data models for bank account number OCR results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Layout of a single OCR row: nine 3x3 glyphs side by side, three content
# lines of 27 characters, each followed by a newline, then one blank line.
DIGITS_PER_ACCOUNT = 9
GLYPH_WIDTH = 3
GLYPH_HEIGHT = 3
LINE_WIDTH = DIGITS_PER_ACCOUNT * GLYPH_WIDTH
CHARACTERS_PER_ROW = GLYPH_HEIGHT * (LINE_WIDTH + 1) + 1

# Characters allowed anywhere in an OCR file
LEGAL_CHARACTERS = frozenset("|_ \n")

UNRECOGNIZED_CHAR = "?"


class Position(Enum):
    """A togglable segment within the middle or bottom row of a glyph."""

    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"


@dataclass(frozen=True)
class SegmentDescription:
    """Which segments of a glyph are lit.

    The top row can only ever carry its bar, so it is a plain flag. The
    middle and bottom rows can have any combination of left, bottom and
    right set, including none of them (the empty set).
    """

    top: bool = False
    middle: frozenset[Position] = frozenset()
    bottom: frozenset[Position] = frozenset()

    @classmethod
    def of(
        cls,
        top: bool,
        middle: tuple[Position, ...] = (),
        bottom: tuple[Position, ...] = (),
    ) -> "SegmentDescription":
        return cls(top=top, middle=frozenset(middle), bottom=frozenset(bottom))


class Digit(Enum):
    """A decoded glyph: one of 0-9, or the unrecognized sentinel."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    UNRECOGNIZED = UNRECOGNIZED_CHAR

    @property
    def char(self) -> str:
        return self.value

    @property
    def is_recognized(self) -> bool:
        return self is not Digit.UNRECOGNIZED


class AccountStatus(Enum):
    OK = "ok"
    ERROR = "error"  # 9 digits, checksum failed, no repair
    ILLEGIBLE = "illegible"  # at least one unrecognized digit, no repair
    AMBIGUOUS = "ambiguous"  # repair found several valid numbers

    @property
    def display(self) -> str:
        mapping = {
            AccountStatus.OK: "OK",
            AccountStatus.ERROR: "ERR",
            AccountStatus.ILLEGIBLE: "ILL",
            AccountStatus.AMBIGUOUS: "AMB",
        }
        return mapping[self]


@dataclass(frozen=True)
class AccountNumber:
    """A decoded account number and its status."""

    number: str  # 9 characters, digits or '?'
    status: AccountStatus

    @property
    def is_legible(self) -> bool:
        return UNRECOGNIZED_CHAR not in self.number


@dataclass(frozen=True)
class AccountNumberRow:
    """Decoding result for one OCR row.

    If repair found a single valid number, ``data.number`` holds it. If repair
    found several, ``data.number`` keeps the number as originally read and
    ``possible_matches`` lists the candidates in the order they were found.
    """

    data: AccountNumber
    possible_matches: Optional[list[str]] = None

    def to_dict(self) -> dict:
        return {
            "number": self.data.number,
            "status": self.data.status.display,
            "possible_matches": list(self.possible_matches or []),
        }


@dataclass(frozen=True)
class FileValidationResult:
    """Outcome of the layout pre-check run on an OCR file."""

    is_valid: bool
    failure_reason: Optional[str] = None


@dataclass
class DecodeSummary:
    """Per-status counts for a decoded file."""

    total: int = 0
    counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_rows(cls, rows: list[AccountNumberRow]) -> "DecodeSummary":
        counts = {status.display: 0 for status in AccountStatus}
        for row in rows:
            counts[row.data.status.display] += 1
        return cls(total=len(rows), counts=counts)
