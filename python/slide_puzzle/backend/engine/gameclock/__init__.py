from slide_puzzle.backend.engine.gameclock.timer import NullTimer, PolledTimer, Timer

__all__ = ["NullTimer", "PolledTimer", "Timer"]
