"""Storage interfaces consumed by the travel service."""

from abc import ABC, abstractmethod

from core.models.travel import Travel


class RecordNotFoundError(Exception):
    """The requested row does not exist. Any other exception is a storage failure."""

    def __init__(self, table: str, record_id: int):
        self.table = table
        self.record_id = record_id
        super().__init__(f"{table} row {record_id} not found")


class TravelRepository(ABC):
    @abstractmethod
    def get_travel(self, travel_id: int) -> Travel: ...

    @abstractmethod
    def save_travel(self, travel: Travel) -> Travel:
        """Insert *travel* and return it with its generated id."""

    @abstractmethod
    def edit_travel(self, travel: Travel) -> None: ...


class UserDirectory(ABC):
    @abstractmethod
    def user_exists(self, user_id: int) -> bool: ...
