"""LootRecord: durable per-container refill bookkeeping."""

from dataclasses import dataclass, field

from chestrefill.models.policy import RefillPolicy
from chestrefill.models.table_ref import TableRef


@dataclass
class LootRecord:
    """Refill state attached to one container.

    `original_table` mirrors the host's live loot-table pointer: it is set
    until the container's original loot is popped. `saved_table` is the
    refill source and is never cleared once set.
    """

    original_table: TableRef | None = None
    original_seed: int = 0
    saved_table: TableRef | None = None
    saved_seed: int = 0
    looted_by: set[str] = field(default_factory=set)
    refill_count: int = 0
    last_refill_time: int = 0  # epoch millis of the last pop or refill
    has_instance_override: bool = False
    policy: RefillPolicy = field(default_factory=RefillPolicy)

    @property
    def is_popped(self) -> bool:
        """True once original loot is gone and a refill source exists."""
        return self.original_table is None and self.saved_table is not None

    def has_looted(self, actor_id: str) -> bool:
        """Check if an actor has already received loot from this container."""
        return actor_id in self.looted_by

    def mark_looted(self, actor_id: str) -> None:
        """Record that an actor received loot. Membership is permanent."""
        self.looted_by.add(actor_id)

    def set_live_table(self, table: TableRef | None, seed: int = 0) -> None:
        """Set or clear the live loot-table pointer."""
        self.original_table = table
        self.original_seed = seed

    def promote_live_table(self) -> None:
        """Copy the live pointer into the saved refill source."""
        if self.original_table is not None:
            self.saved_table = self.original_table
            self.saved_seed = self.original_seed
