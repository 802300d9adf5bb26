import pytest

from quizmaster.bank_general import general_knowledge, science
from quizmaster.bank_humanities import geography, history
from quizmaster.bank_tech import technology
from quizmaster.models import Category
from quizmaster.questions import load_questions


@pytest.mark.parametrize(
    "category, bank",
    [
        (Category.GENERAL_KNOWLEDGE, general_knowledge),
        (Category.SCIENCE, science),
        (Category.HISTORY, history),
        (Category.GEOGRAPHY, geography),
        (Category.TECHNOLOGY, technology),
    ],
)
def test_category_maps_to_its_bank(category, bank):
    assert load_questions(category) == bank()


@pytest.mark.parametrize("number", [1, 2, 3, 4, 5])
def test_plain_integers_are_accepted(number):
    assert load_questions(number) == load_questions(Category(number))


@pytest.mark.parametrize("category", list(Category))
def test_every_category_has_twenty_questions(category):
    assert len(load_questions(category)) == 20


def test_categories_have_different_questions():
    firsts = {load_questions(c)[0].text for c in Category}
    assert len(firsts) == len(Category)


def test_general_first_question():
    first = load_questions(1)[0]
    assert first.text == "Qual é o maior oceano do planeta?"
    assert first.options[first.correct] == "Pacífico"


@pytest.mark.parametrize("bad", [0, 6, -1, 100])
def test_unknown_category_raises(bad):
    with pytest.raises(ValueError):
        load_questions(bad)