"""RefillableContainer: host glue around an item store.

Wraps the container's slots and its LootRecord, wires opens through the
RefillEngine, and hands the live loot-table pointer to the host's loot
generator whenever the engine leaves it set.
"""

import logging
from collections.abc import Callable
from typing import Any

from chestrefill.config import RefillConfig
from chestrefill.engine.actions import RefillAction
from chestrefill.engine.engine import RefillEngine
from chestrefill.engine.refillable import Refillable
from chestrefill.errors import MalformedRecordError
from chestrefill.helpers.serializer import deserialize, save_to_tag
from chestrefill.models.actor import Actor
from chestrefill.models.record import LootRecord
from chestrefill.models.table_ref import TableRef

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 27

LootGenerator = Callable[[TableRef, int, Actor | None], list[Any]]


class RefillableContainer(Refillable):
    """A loot container that refills according to its resolved policy."""

    def __init__(
        self,
        generate_loot: LootGenerator,
        config: RefillConfig | None = None,
        engine: RefillEngine | None = None,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._generate_loot = generate_loot
        self._config = config or RefillConfig()
        self._engine = engine or RefillEngine()
        self._capacity = capacity
        self._items: list[Any] = []
        self._record = LootRecord(policy=self._config.default_properties)

    @property
    def record(self) -> LootRecord:
        return self._record

    @property
    def items(self) -> list[Any]:
        """A copy of the current slot contents."""
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def take_all(self) -> list[Any]:
        """Remove and return every item in the container."""
        taken, self._items = self._items, []
        return taken

    def put(self, item: Any) -> bool:
        """Add one item. Returns False if the container is full."""
        if len(self._items) >= self._capacity:
            return False
        self._items.append(item)
        return True

    def assign_loot_table(self, table: TableRef, seed: int = 0) -> None:
        """Give a fresh container its original loot table (world generation).

        The table also becomes the refill source right away, so a first open
        without an actor still leaves the container refillable.
        """
        self.set_loot_table(table, seed)
        self._record.promote_live_table()
        if not self._record.has_instance_override:
            self._record.policy = self._config.policy_for(table)

    # --- Access ---

    def unpack_loot_table(self, actor: Actor | None) -> RefillAction:
        """Handle an open: decide on a refill, then pop any pending loot."""
        action = self._engine.on_access(self, actor)
        self._pop_loot(actor)
        return action

    def _pop_loot(self, actor: Actor | None) -> None:
        table = self.loot_table
        if table is None:
            return
        seed = self.loot_table_seed
        self.set_loot_table(None)

        dropped = 0
        for item in self._generate_loot(table, seed, actor):
            if not self.put(item):
                dropped += 1
        if dropped:
            logger.debug("Container full, dropped %d items from %s", dropped, table)

    # --- Persistence ---

    def save(self, tag: dict[str, Any]) -> dict[str, Any]:
        """Write loot and refill state into the host's save dict."""
        save_to_tag(self._record, tag)
        return tag

    def load(self, tag: dict[str, Any]) -> bool:
        """Restore loot and refill state from the host's save dict.

        A malformed record only affects this container: it is logged and
        the container behaves as if it never had loot.

        Returns:
            True if a loot record was restored.
        """
        try:
            record = deserialize(tag, self._config)
        except MalformedRecordError as e:
            logger.warning("Skipping refill data for container: %s", e)
            record = None

        if record is None:
            self._record = LootRecord(policy=self._config.default_properties)
            return False
        self._record = record
        return True
