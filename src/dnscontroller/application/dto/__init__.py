from .answer import AnswerDTO, DetailDTO, parse_answers
from .record import RecordDTO

__all__ = [
    "AnswerDTO",
    "DetailDTO",
    "RecordDTO",
    "parse_answers",
]
