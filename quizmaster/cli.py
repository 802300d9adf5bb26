"""Interactive text menu of the quiz game."""

from __future__ import annotations

import random
import re
import sys
from typing import TextIO

from quizmaster.models import LETTERS, Category
from quizmaster.randomizer import draw_questions
from quizmaster.ranking import Ranking

_INTEGER = re.compile(r"[+-]?\d+")
_INVALID_OPTION = "\nOpcao invalida. Tente novamente.\n"


def _next_token(stdin: TextIO) -> str:
    """Return the first word of the next non-blank line; raise EOFError at end."""
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError("end of input")
        words = line.split()
        if words:
            return words[0]


def read_integer(prompt: str = "", stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Prompt for an integer, asking again until one is entered."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write(prompt)
    stdout.flush()
    while True:
        match = _INTEGER.match(_next_token(stdin))
        if match:
            return int(match.group())
        stdout.write("Entrada invalida. Digite um numero: ")
        stdout.flush()


def read_choice(prompt: str = "", stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Prompt for an answer letter A-D (any case) and return it upper-cased."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write(prompt)
    stdout.flush()
    while True:
        letter = _next_token(stdin)[0].upper()
        if letter in LETTERS:
            return letter
        stdout.write("Entrada invalida. Digite apenas A, B, C ou D: ")
        stdout.flush()


class QuizApp:
    """The quiz game with its main menu, rounds and ranking."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.ranking = Ranking()

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _integer(self, prompt: str) -> int:
        return read_integer(prompt, self.stdin, self.stdout)

    def run(self) -> None:
        """Run the main menu until the player chooses to leave."""
        while True:
            self._write(
                "\n-----------------------------\n"
                "Seja bem-vindo ao QuizMaster!\n"
                "-----------------------------\n\n"
                "1. Jogar\n"
                "2. Ver Ranking\n"
                "3. Sair\n"
            )
            choice = self._integer("Escolha uma opcao: ")
            if choice == 1:
                self._play_session()
            elif choice == 2:
                self._show_ranking("\nDigite 0 para voltar ao menu principal: ")
            elif choice == 3:
                return
            else:
                self._write(_INVALID_OPTION)

    def _show_ranking(self, prompt: str) -> None:
        while True:
            self._write(self.ranking.format())
            if self._integer(prompt) == 0:
                return

    def _ask_category(self) -> Category:
        self._write("\nEscolha uma categoria:\n")
        self._write("".join(f"{category.value}. {category.label}\n" for category in Category))
        while True:
            number = self._integer("Digite o numero da categoria: ")
            try:
                return Category(number)
            except ValueError:
                self._write(_INVALID_OPTION)

    def _play_round(self) -> None:
        self._write("Digite seu nome: ")
        name = _next_token(self.stdin)
        category = self._ask_category()

        hits = 0
        for number, question in enumerate(draw_questions(category, rng=self.rng), start=1):
            self._write(f"\nPergunta {number}: {question.text}\n")
            self._write("".join(f"{letter}) {option}\n" for letter, option in zip(LETTERS, question.options)))
            answer = read_choice("Sua resposta: ", self.stdin, self.stdout)
            if question.is_correct(answer):
                self._write("Correto!\n")
                hits += 1
            else:
                self._write(f"Errado. A resposta correta era {question.correct_letter()}.\n")

        self.ranking.record(name, hits)

    def _play_session(self) -> None:
        while True:
            self._play_round()
            if not self._end_menu():
                return

    def _end_menu(self) -> bool:
        """Return True to play again, False to go back to the main menu."""
        while True:
            self._write(
                "\n========= MENU FIM DE JOGO =========\n"
                "1. Jogar Novamente\n"
                "2. Ver Ranking\n"
                "3. Voltar ao Menu Principal\n"
            )
            choice = self._integer("Escolha uma opcao: ")
            if choice == 1:
                return True
            if choice == 2:
                self._show_ranking("\nDigite 0 para voltar: ")
            elif choice == 3:
                return False
            else:
                self._write(_INVALID_OPTION)


def main(argv: list[str] | None = None) -> int:
    """Start the game on standard input and output."""
    app = QuizApp()
    try:
        app.run()
    except (EOFError, KeyboardInterrupt):
        app.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())