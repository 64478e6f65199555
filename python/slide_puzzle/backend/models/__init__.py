from slide_puzzle.backend.models.besttime import BestTimeRecord
from slide_puzzle.backend.models.board import Board, Direction, InvalidSize

__all__ = ["Board", "BestTimeRecord", "Direction", "InvalidSize"]
