"""Conversion between LootRecord and the container's persisted save data.

The host stores each container as a plain dict. Two parts of it belong to us:

- `LootTable` / `LootTableSeed`: the live loot-table pointer, present until
  the original loot is popped.
- `ChestRefill`: the refill bookkeeping, present once the container has been
  popped at least once.
"""

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chestrefill.errors import MalformedRecordError
from chestrefill.models.policy import RefillPolicy
from chestrefill.models.record import LootRecord
from chestrefill.models.table_ref import TableRef
from chestrefill.models.tags import (
    LOOT_TABLE_KEY,
    LOOT_TABLE_SEED_KEY,
    REFILL_TAG_KEY,
    CustomValuesTag,
    RefillTag,
)

if TYPE_CHECKING:
    from chestrefill.config import RefillConfig

logger = logging.getLogger(__name__)


def serialize(record: LootRecord) -> dict[str, Any] | None:
    """Build the `ChestRefill` record for a container.

    Returns None while the original loot is still unpopped (or if there is no
    refill source at all): an untouched container persists nothing extra.
    """
    if not record.is_popped:
        return None

    custom_values = None
    if record.has_instance_override:
        custom_values = CustomValuesTag(
            randomize_loot_seed=record.policy.randomize_loot_seed,
            refill_full=record.policy.refill_full,
            allow_reloot_by_default=record.policy.allow_reloot_by_default,
            max_refills=record.policy.max_refills,
            min_wait_time=record.policy.min_wait_time,
        )

    tag = RefillTag(
        saved_loot_table=str(record.saved_table),
        saved_loot_table_seed=record.saved_seed,
        refill_counter=record.refill_count,
        last_refill_time=record.last_refill_time,
        looted_uuids=sorted(record.looted_by),
        custom_values=custom_values,
    )
    return tag.model_dump(by_alias=True, exclude_none=True)


def deserialize(tag: dict[str, Any], config: "RefillConfig") -> LootRecord | None:
    """Restore a LootRecord from a container's save data.

    Args:
        tag: The host's full per-container save dict.
        config: Supplies global defaults and per-table overrides.

    Returns:
        The restored record, or None if the container carries no loot at all.

    Raises:
        MalformedRecordError: If a loot table identifier is empty or invalid.
    """
    record = LootRecord(policy=config.default_properties)

    live_table = tag.get(LOOT_TABLE_KEY)
    if isinstance(live_table, str):
        seed = tag.get(LOOT_TABLE_SEED_KEY, 0)
        record.set_live_table(TableRef.parse(live_table), seed if isinstance(seed, int) else 0)

    raw = tag.get(REFILL_TAG_KEY)
    if isinstance(raw, dict) and raw:
        _load_refill_tag(record, raw, config)
    elif record.original_table is not None:
        # First observed state: the live pointer becomes the refill source
        record.promote_live_table()
        record.policy = config.policy_for(record.saved_table)
    else:
        return None

    return record


def _load_refill_tag(record: LootRecord, raw: dict[str, Any], config: "RefillConfig") -> None:
    """Populate bookkeeping and policy from a non-empty `ChestRefill` record."""
    try:
        refill_tag = RefillTag.model_validate(raw)
    except ValidationError as e:
        raise MalformedRecordError(f"Unreadable {REFILL_TAG_KEY} record: {e}") from e

    record.saved_table = TableRef.parse(refill_tag.saved_loot_table)
    record.saved_seed = refill_tag.saved_loot_table_seed
    record.refill_count = refill_tag.refill_counter
    record.last_refill_time = refill_tag.last_refill_time
    record.looted_by = set(refill_tag.looted_uuids)

    instance_override = None
    custom = refill_tag.custom_values
    if custom is not None:
        record.has_instance_override = True
        instance_override = RefillPolicy(
            max_refills=custom.max_refills,
            min_wait_time=custom.min_wait_time,
            refill_full=custom.refill_full,
            randomize_loot_seed=custom.randomize_loot_seed,
            allow_reloot_by_default=custom.allow_reloot_by_default,
        )
    record.policy = config.policy_for(record.saved_table, instance_override)
    logger.debug(
        "Loaded refill record for %s (%d refills, %d looters)",
        record.saved_table,
        record.refill_count,
        len(record.looted_by),
    )


def save_to_tag(record: LootRecord, tag: dict[str, Any]) -> None:
    """Write the live pointer and refill record into a container's save dict."""
    if record.original_table is not None:
        tag[LOOT_TABLE_KEY] = str(record.original_table)
        if record.original_seed != 0:
            tag[LOOT_TABLE_SEED_KEY] = record.original_seed

    refill_tag = serialize(record)
    if refill_tag is not None:
        tag[REFILL_TAG_KEY] = refill_tag
