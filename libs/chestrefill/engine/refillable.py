"""Refillable: the capability a container exposes to the refill engine."""

from abc import ABC, abstractmethod

from chestrefill.models.record import LootRecord
from chestrefill.models.table_ref import TableRef


class Refillable(ABC):
    """A container whose loot can be popped and refilled.

    The live loot-table pointer is kept on the container's LootRecord, so
    implementations only need to say whether their slots are empty and
    where their record lives.
    """

    @property
    @abstractmethod
    def record(self) -> LootRecord:
        """The refill bookkeeping owned by this container."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True if every item slot is empty."""

    @property
    def loot_table(self) -> TableRef | None:
        return self.record.original_table

    @property
    def loot_table_seed(self) -> int:
        return self.record.original_seed

    def set_loot_table(self, table: TableRef | None, seed: int = 0) -> None:
        """Set or clear the live loot-table pointer."""
        self.record.set_live_table(table, seed)
