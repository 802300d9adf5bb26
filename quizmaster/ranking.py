"""Player ranking kept during a session."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CAPACITY = 100
TOP_SIZE = 5


@dataclass
class Ranking:
    """Accumulated points per player, kept in the order players first appear.

    At most ``capacity`` distinct players are stored. A new player beyond
    that limit is not recorded.
    """

    capacity: int = DEFAULT_CAPACITY
    _scores: dict[str, int] = field(default_factory=dict, init=False, repr=False)

    def record(self, name: str, points: int) -> bool:
        """Add points to a player, creating the entry when there is room.

        Returns whether the points were stored.
        """
        if name in self._scores:
            self._scores[name] += points
            return True
        if len(self._scores) >= self.capacity:
            return False
        self._scores[name] = points
        return True

    def top(self, n: int = TOP_SIZE) -> list[tuple[str, int]]:
        """Return up to ``n`` (name, points) pairs in ranking order."""
        return list(self._scores.items())[: max(n, 0)]

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, name: object) -> bool:
        return name in self._scores

    def __getitem__(self, name: str) -> int:
        return self._scores[name]

    def format(self, limit: int = TOP_SIZE) -> str:
        """Return the ranking as shown to players."""
        if not self._scores:
            return "\nNenhum jogo foi jogado ainda.\n"
        lines = [f"\n=== TOP {limit} JOGADORES ===\n"]
        lines.extend(
            f"{position}. {name} - {points} pontos\n"
            for position, (name, points) in enumerate(self.top(limit), start=1)
        )
        return "".join(lines)