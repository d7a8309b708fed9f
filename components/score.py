class ScoreBoard:
    def __init__(self):
        self._score = 0

    @property
    def score(self) -> int:
        return self._score

    def increment(self) -> int:
        self._score += 1
        return self._score
