from __future__ import annotations


class ScoreTracker:
    def __init__(self, start: int = 0):
        self._score = start

    def current(self) -> int:
        return self._score

    def add(self, points: int) -> None:
        self._score += points
