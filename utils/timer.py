class FixedStepTimer:
    """Turns variable frame times into a whole number of fixed steps.

    Elapsed milliseconds are accumulated and every full step interval is
    consumed as one step, the remainder is carried to the next frame.
    """

    def __init__(self, steps_per_second: float):
        if steps_per_second <= 0:
            raise ValueError("steps_per_second must be positive")
        self.step_ms = 1000.0 / steps_per_second
        self.reset()

    def reset(self):
        self._accumulated_ms = 0.0

    def advance(self, elapsed_ms: float) -> int:
        self._accumulated_ms += elapsed_ms
        steps = int(self._accumulated_ms // self.step_ms)
        self._accumulated_ms -= steps * self.step_ms
        return steps

    @property
    def pending_ms(self) -> float:
        return self._accumulated_ms
