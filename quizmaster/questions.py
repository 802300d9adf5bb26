"""Look up the question bank of a category."""

from __future__ import annotations

from quizmaster.bank_general import general_knowledge, science
from quizmaster.bank_humanities import geography, history
from quizmaster.bank_tech import technology
from quizmaster.models import Category, Question

_BANKS = {
    Category.GENERAL_KNOWLEDGE: general_knowledge,
    Category.SCIENCE: science,
    Category.HISTORY: history,
    Category.GEOGRAPHY: geography,
    Category.TECHNOLOGY: technology,
}


def load_questions(category: Category | int) -> tuple[Question, ...]:
    """Return every question of a category.

    Raises ValueError when the category number is not one of the menu's.
    """
    try:
        key = Category(category)
    except ValueError:
        raise ValueError(f"unknown category: {category!r}") from None
    return _BANKS[key]()