"""Persisted rows - plain dataclasses mapped imperatively onto the store tables"""
from abc import ABC
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Set


@dataclass
class AbstractModel(ABC):
    """
    Base model, from which any persisted model should be inherited.
    """

    def to_dict(self, exclude: Optional[Set[str]] = None) -> Dict[str, Any]:
        """
        Create a dictionary representation of the model.

        exclude: set of model fields, which should be excluded from dictionary representation.
        """
        data: Dict[str, Any] = asdict(self)
        for key in exclude or ():
            data.pop(key, None)

        return data


@dataclass
class RecordModel(AbstractModel):
    """Row of the records table"""
    record: str
    record_type: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class AnswerModel(AbstractModel):
    """Row of the answers table"""
    target: str
    type: str
    owner_id: str
    record_id: str
    ttl: int = 0
    has_details: bool = False
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class AnswerDetailModel(AbstractModel):
    """Row of the answer_details table, nullable columns stay Optional"""
    answer_id: str
    port: Optional[int] = None
    priority: Optional[int] = None
    weight: Optional[int] = None
    protocol: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
