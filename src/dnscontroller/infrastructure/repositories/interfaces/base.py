"""Abstract repository interfaces - Domain layer contracts"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from dnscontroller.domain.models import AbstractModel

T = TypeVar('T', bound=AbstractModel)


class AbstractRepository(ABC, Generic[T]):
    @abstractmethod
    async def get(self, id: str) -> Optional[T]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_fields(self, **filters) -> Optional[T]:
        raise NotImplementedError

    @abstractmethod
    async def one_by_fields(self, **filters) -> T:
        """Like get_by_fields, but a miss raises EntityNotFound"""
        raise NotImplementedError

    @abstractmethod
    async def find_many(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None
    ) -> List[T]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, entity: T) -> T:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, id: str) -> None:
        raise NotImplementedError
