import time

class Rate:
    """Paces a sample loop at `hz`; sleep() waits out the rest of the period."""
    def __init__(self, hz: float):
        if hz <= 0:
            raise ValueError(f"rate should be >0 Hz, got {hz}")
        self.period = 1.0 / hz
        self._deadline = time.perf_counter() + self.period
    def sleep(self) -> float:
        """Returns the time slept in seconds (0 if the loop is behind)."""
        rem = self._deadline - time.perf_counter()
        if rem > 0:
            time.sleep(rem)
        else:
            rem = 0.0
            # behind schedule: restart from now instead of bursting to catch up
            self._deadline = time.perf_counter()
        self._deadline += self.period
        return rem
