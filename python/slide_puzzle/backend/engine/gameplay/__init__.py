from slide_puzzle.backend.engine.gameplay.session import MoveResult, Session, SessionView

__all__ = ["MoveResult", "Session", "SessionView"]
