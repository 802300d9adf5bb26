import pytest

from quizmaster.ranking import Ranking


def test_empty_ranking_message():
    ranking = Ranking()
    assert len(ranking) == 0
    assert ranking.format() == "\nNenhum jogo foi jogado ainda.\n"


def test_record_new_player():
    ranking = Ranking()
    assert ranking.record("ana", 3) is True
    assert len(ranking) == 1
    assert ranking["ana"] == 3


def test_record_accumulates_points():
    ranking = Ranking()
    ranking.record("ana", 3)
    ranking.record("ana", 4)
    assert len(ranking) == 1
    assert ranking["ana"] == 7


def test_insertion_order_kept():
    ranking = Ranking()
    for name, points in [("ana", 1), ("bia", 5), ("caio", 2)]:
        ranking.record(name, points)
    assert ranking.top() == [("ana", 1), ("bia", 5), ("caio", 2)]


def test_top_is_limited():
    ranking = Ranking()
    names = [f"p{i}" for i in range(8)]
    for name in names:
        ranking.record(name, 1)
    assert [name for name, _ in ranking.top()] == names[:5]
    assert len(ranking.top(2)) == 2


def test_capacity_rejects_new_players_but_updates_existing():
    ranking = Ranking(capacity=2)
    ranking.record("a", 1)
    ranking.record("b", 1)
    assert ranking.record("c", 1) is False
    assert "c" not in ranking
    assert ranking.record("a", 2) is True
    assert ranking["a"] == 3


def test_format_lines():
    ranking = Ranking()
    ranking.record("ana", 3)
    ranking.record("bia", 0)
    text = ranking.format()
    assert text.startswith("\n=== TOP 5 JOGADORES ===\n")
    assert "1. ana - 3 pontos\n" in text
    assert "2. bia - 0 pontos\n" in text


def test_format_shows_at_most_limit_players():
    ranking = Ranking()
    for i in range(7):
        ranking.record(f"p{i}", i)
    text = ranking.format()
    assert text.count(" pontos\n") == 5
    assert "p5" not in text


def test_missing_player_lookup_raises():
    with pytest.raises(KeyError):
        Ranking()["nobody"]