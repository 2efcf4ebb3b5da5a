"""Lexical tokens produced by the scanner and heading normalizer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Only these heading levels create tree nodes; deeper runs stay content.
MAX_STRUCTURAL_LEVEL = 5


class InvalidTokenError(ValueError):
    """Raised when a token is built without a kind or without text."""


class UnscannableInputError(ValueError):
    """Raised when no scanner can claim the input at a position."""

    def __init__(self, position: int, remaining: str):
        self.position = position
        self.remaining = remaining
        preview = remaining[:20]
        super().__init__(f"The scanners could not match the input at offset {position}: {preview!r}")


class TokenKind(Enum):
    UNDERSCORE = "UNDERSCORE"
    STAR = "STAR"
    NEWLINE = "NEWLINE"
    EMPTY = "EMPTY"
    HEADING = "HEADING"
    TEXT = "TEXT"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """
    An immutable lexical unit.

    Heading tokens carry their level; every other kind has level 0.
    Text is never empty except for the EOF sentinel.
    """
    kind: TokenKind
    text: str
    level: int = 0

    def __post_init__(self):
        if self.kind is None or self.text is None:
            raise InvalidTokenError(f"Token needs a kind and text, got {self.kind!r} / {self.text!r}")
        if not self.text and self.kind is not TokenKind.EOF:
            raise InvalidTokenError(f"Empty text for {self.kind.value} token")
        if self.kind is TokenKind.HEADING and self.level < 1:
            raise InvalidTokenError(f"Heading token needs a level >= 1, got {self.level}")

    def __len__(self) -> int:
        return len(self.text)

    @property
    def label(self) -> str:
        """Short kind name, e.g. ``H2`` for a level-2 heading."""
        if self.kind is TokenKind.HEADING:
            return f"H{self.level}"
        return self.kind.value

    def same_kind(self, other: Optional["Token"]) -> bool:
        """Kind equality, counting heading levels as part of the kind."""
        return other is not None and self.kind is other.kind and self.level == other.level

    def is_heading(self) -> bool:
        return self.kind is TokenKind.HEADING

    def is_structural_heading(self) -> bool:
        """True for headings that open a section in the tree (levels 1-5)."""
        return self.kind is TokenKind.HEADING and 1 <= self.level <= MAX_STRUCTURAL_LEVEL

    @classmethod
    def heading(cls, level: int) -> "Token":
        return cls(kind=TokenKind.HEADING, text="#" * level, level=level)

    @classmethod
    def end_of_file(cls) -> "Token":
        return cls(kind=TokenKind.EOF, text="")
