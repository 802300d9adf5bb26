import pytest

from quizmaster.bank_general import general_knowledge
from quizmaster.bank_humanities import geography, history
from quizmaster.models import Question

HISTORY_ANSWERS = [1, 2, 2, 0, 1, 2, 0, 0, 0, 2, 1, 1, 1, 2, 1, 1, 1, 1, 2, 3]
GEOGRAPHY_ANSWERS = [2, 1, 2, 0, 3, 3, 1, 3, 3, 2, 3, 2, 2, 2, 1, 0, 2, 2, 1, 2]


def test_bank_has_twenty_questions():
    assert len(history()) == 20
    assert len(geography()) == 20


def test_bank_same_size_as_general():
    assert len(history()) == len(general_knowledge())
    assert len(geography()) == len(general_knowledge())


def test_every_entry_is_a_valid_question():
    for question in (*history(), *geography()):
        assert isinstance(question, Question)
        assert len(question.options) == 4
        assert 0 <= question.correct < 4


def test_question_texts_are_unique():
    for questions in (history(), geography()):
        texts = [q.text for q in questions]
        assert len(set(texts)) == len(texts)


def test_options_within_question_are_unique():
    for question in (*history(), *geography()):
        assert len(set(question.options)) == len(question.options)


def test_bank_is_stable_between_calls():
    assert [q.correct for q in history()] == HISTORY_ANSWERS
    assert [q.correct for q in history()] == HISTORY_ANSWERS
    assert [q.correct for q in geography()] == GEOGRAPHY_ANSWERS
    assert [q.correct for q in geography()] == GEOGRAPHY_ANSWERS


def test_history_and_geography_are_distinct():
    history_texts = {q.text for q in history()}
    geography_texts = {q.text for q in geography()}
    assert history_texts.isdisjoint(geography_texts)


def test_history_first_question():
    first = history()[0]
    assert first.text == "Em que ano ocorreu a Proclamação da República no Brasil?"
    assert first.options[first.correct] == "1889"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Quem assinou a Lei Áurea?", "Princesa Isabel"),
        ("Qual era a capital do Império Bizantino?", "Constantinopla"),
        ("Quem descobriu o caminho marítimo para as Índias?", "Vasco da Gama"),
        ("Quem comandou a Revolução Russa de 1917?", "Lenin"),
    ],
)
def test_history_answers(text, expected):
    question = next(q for q in history() if q.text == text)
    assert question.options[question.correct] == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Qual é a capital do Canadá?", "Ottawa"),
        ("Qual é a capital do Japão?", "Tóquio"),
        ("Qual é o menor país do mundo em território?", "Vaticano"),
        ("Qual é o maior deserto do mundo?", "Deserto da Antártida"),
    ],
)
def test_geography_answers(text, expected):
    question = next(q for q in geography() if q.text == text)
    assert question.options[question.correct] == expected


def test_geography_australia_question_differs_from_general_version():
    geo = next(q for q in geography() if q.text == "Qual é a capital da Austrália?")
    gen = next(q for q in general_knowledge() if q.text == "Qual é a capital da Austrália?")
    assert geo.options[geo.correct] == gen.options[gen.correct]
    assert "Perth" in geo.options
    assert "Perth" not in gen.options


def test_history_last_question_is_answered_by_its_letter():
    last = history()[-1]
    assert last.is_correct(last.correct_letter())
    assert last.options[last.correct] == "Vasco da Gama"


def test_each_question_accepts_exactly_one_letter():
    for question in (*history(), *geography()):
        accepted = [letter for letter in "abcd" if question.is_correct(letter)]
        assert accepted == [question.correct_letter().lower()]