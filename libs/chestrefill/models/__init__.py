from chestrefill.models.actor import Actor
from chestrefill.models.policy import UNLIMITED_REFILLS, PolicyOverride, RefillPolicy
from chestrefill.models.record import LootRecord
from chestrefill.models.table_ref import TableRef
from chestrefill.models.tags import (
    LOOT_TABLE_KEY,
    LOOT_TABLE_SEED_KEY,
    REFILL_TAG_KEY,
    CustomValuesTag,
    RefillTag,
)

__all__ = [
    "Actor",
    "CustomValuesTag",
    "LOOT_TABLE_KEY",
    "LOOT_TABLE_SEED_KEY",
    "LootRecord",
    "PolicyOverride",
    "REFILL_TAG_KEY",
    "RefillPolicy",
    "RefillTag",
    "TableRef",
    "UNLIMITED_REFILLS",
]
