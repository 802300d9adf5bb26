"""Draw a random selection of questions from a category."""

from __future__ import annotations

import random

from quizmaster.models import Category, Question
from quizmaster.questions import load_questions

DEFAULT_COUNT = 5


def draw_questions(
    category: Category | int,
    count: int = DEFAULT_COUNT,
    rng: random.Random | None = None,
) -> list[Question]:
    """Return `count` distinct questions of the category in random order.

    Raises ValueError for an unknown category or a count outside
    0..number of questions in the category.
    """
    bank = load_questions(category)
    if not 0 <= count <= len(bank):
        raise ValueError(f"count must be between 0 and {len(bank)}, got {count}")
    shuffled = list(bank)
    (rng if rng is not None else random.Random()).shuffle(shuffled)
    return shuffled[:count]