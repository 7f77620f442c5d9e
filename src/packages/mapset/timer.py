"""Implementation of the Timer class."""

__all__ = ["Timer"]

import time

class Timer:
    """A class for measuring a time interval."""

    def __init__(self):
        self.__time = None
        self.reset()

    def reset(self):
        """Reset the timer."""
        self.__time = time.perf_counter()

    def get(self):
        """Get the number of seconds since the timer was last reset (or
        created)."""
        return time.perf_counter() - self.__time

    def getAndReset(self):
        """Get the number of seconds since the timer was last reset (or
        created) and then reset the timer."""
        t = time.perf_counter() - self.__time
        self.reset()
        return t
