# quizmaster

QuizMaster is a multiple-choice quiz game that you play in a terminal. The
questions and the menus are in Portuguese.

## Installation

```
pip install .
```

## Playing

```
quizmaster
```

The main menu offers three options:

1. **Jogar**: play a round.
2. **Ver Ranking**: show the ranking.
3. **Sair**: quit.

At the start of a round you enter your name (the first word you type is
used) and pick a category:

1. Conhecimentos Gerais
2. Ciencias
3. Historia
4. Geografia
5. Tecnologia

A number outside 1 to 5 is rejected and the category is asked again.

Five questions are drawn at random from the twenty in that category. Answer
each one with `A`, `B`, `C` or `D`, in upper or lower case; anything else is
asked again. Every correct answer is worth one point, and a wrong answer shows
the right letter.

After a round, the end-of-game menu lets you play again, view the ranking or
go back to the main menu. Where a number is expected, non-numeric input is
asked again. The game also ends when the input runs out or on Ctrl+C.

## The ranking

The ranking shows the first five entries, numbered, each with its points. If
a name plays again, the new points are added to the points that name already
has. Entries stay in the order in which the players first finished a round;
they are not sorted by points. The ranking holds at most 100 players; a new
name beyond that is not recorded.

## Using it as a library

```python
import random

from quizmaster.models import Category
from quizmaster.questions import load_questions
from quizmaster.randomizer import draw_questions
from quizmaster.ranking import Ranking

bank = load_questions(Category.SCIENCE)      # all 20 questions
round_ = draw_questions(Category.SCIENCE, 5, random.Random(1))

for question in round_:
    print(question.text, question.correct_letter(), question.is_correct("b"))

ranking = Ranking()
ranking.record("ana", 3)
ranking.record("ana", 2)                     # ana now has 5 points
print(ranking["ana"], len(ranking), ranking.top(5))
print(ranking.format(5))
```

- `quizmaster.models`: `Category` (an `IntEnum` numbered as in the menu, with
  a `label`) and `Question` (a frozen dataclass with `text`, four `options`
  and the `correct` index; `is_correct(letter)` raises `ValueError` for
  anything other than A to D).
- `quizmaster.questions.load_questions(category)`: all questions of a
  category; `ValueError` for an unknown category.
- `quizmaster.randomizer.draw_questions(category, count=5, rng=None)`:
  `count` distinct questions in random order; `ValueError` when `count` is
  outside 0 to the size of the category.
- `quizmaster.ranking.Ranking`: `record(name, points)` returns whether the
  points were stored; `top(n)`, `format(limit)`, `len()`, `in` and
  indexing by name.

`quizmaster.cli.QuizApp` runs the whole interactive game on any text streams,
with an optional `random.Random` for the draws, so you can drive it from your
own input and output:

```python
import io
from quizmaster.cli import QuizApp

out = io.StringIO()
QuizApp(io.StringIO("3\n"), out).run()
```

`read_integer` and `read_choice` in the same module do the prompting on their
own.

## What it does not do

The ranking is kept in memory only: it is not saved anywhere and is lost when
the game exits. The question banks are built in; there is no way to load
questions from a file.

## Running the tests

```
pip install .[test]
pytest
```