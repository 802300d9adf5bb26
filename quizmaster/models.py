"""Core data types: quiz categories and multiple-choice questions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

LETTERS = "ABCD"


class Category(IntEnum):
    """Question categories, numbered as they appear in the game menu."""

    GENERAL_KNOWLEDGE = 1
    SCIENCE = 2
    HISTORY = 3
    GEOGRAPHY = 4
    TECHNOLOGY = 5

    @property
    def label(self) -> str:
        """Human-readable name shown in the category menu."""
        return _LABELS[self]


_LABELS = {
    Category.GENERAL_KNOWLEDGE: "Conhecimentos Gerais",
    Category.SCIENCE: "Ciencias",
    Category.HISTORY: "Historia",
    Category.GEOGRAPHY: "Geografia",
    Category.TECHNOLOGY: "Tecnologia",
}


@dataclass(frozen=True)
class Question:
    """A question with four options (A to D) and the index of the right one."""

    text: str
    options: tuple[str, str, str, str]
    correct: int

    def __post_init__(self) -> None:
        options = tuple(self.options)
        if len(options) != len(LETTERS):
            raise ValueError(
                f"a question needs exactly {len(LETTERS)} options, got {len(options)}"
            )
        if not 0 <= self.correct < len(LETTERS):
            raise ValueError(f"correct index out of range: {self.correct}")
        object.__setattr__(self, "options", options)

    def is_correct(self, letter: str) -> bool:
        """Return whether the answer letter (A-D, any case) is the right one."""
        if not isinstance(letter, str) or len(letter) != 1 or letter.upper() not in LETTERS:
            raise ValueError(f"answer must be one of A, B, C or D: {letter!r}")
        return LETTERS.index(letter.upper()) == self.correct

    def correct_letter(self) -> str:
        """Return the letter of the right option."""
        return LETTERS[self.correct]