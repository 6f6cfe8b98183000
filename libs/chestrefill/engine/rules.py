"""Refill decision rules: pure functions over a LootRecord.

`on_access` is the whole decision table. It returns exactly one action per
call and only mutates the record for POP_ORIGINAL and REFILL. Time is
passed in explicitly (epoch millis) so the rules stay deterministic.
"""

from chestrefill.engine.actions import RefillAction
from chestrefill.engine.permissions import (
    RELOOT_PERMISSION,
    PermissionChecker,
    default_permission,
)
from chestrefill.engine.refillable import Refillable
from chestrefill.models.actor import Actor
from chestrefill.models.policy import UNLIMITED_REFILLS
from chestrefill.models.record import LootRecord


def can_still_refill(record: LootRecord) -> bool:
    """Check if the container is still below its refill ceiling."""
    max_refills = record.policy.max_refills
    return record.refill_count < max_refills or max_refills == UNLIMITED_REFILLS


def has_enough_time_passed(record: LootRecord, now: int) -> bool:
    """Check if the cooldown since the last pop or refill has fully elapsed.

    Strictly greater: a wait of exactly `min_wait_time` seconds is not enough.
    """
    return now - record.last_refill_time > record.policy.min_wait_millis


def has_reloot_permission(
    record: LootRecord,
    actor: Actor,
    has_permission: PermissionChecker = default_permission,
) -> bool:
    """Check if an actor may receive loot from this container (again)."""
    granted = has_permission(actor, RELOOT_PERMISSION, record.policy.allow_reloot_by_default)
    return granted or not record.has_looted(actor.uuid)


def can_refill_for(
    record: LootRecord,
    actor: Actor,
    now: int,
    has_permission: PermissionChecker = default_permission,
) -> bool:
    """All non-emptiness refill conditions for one actor."""
    return (
        can_still_refill(record)
        and has_enough_time_passed(record, now)
        and has_reloot_permission(record, actor, has_permission)
    )


def on_access(
    container: Refillable,
    actor: Actor | None,
    *,
    now: int,
    has_permission: PermissionChecker = default_permission,
) -> RefillAction:
    """Decide what happens when an actor opens a container.

    - Live pointer set: POP_ORIGINAL. The pointer is copied into the saved
      refill source; clearing it is left to the host's pop.
    - Saved table only: REFILL if the container is empty (or refill_full is
      on) and the actor passes every refill condition. The live pointer is
      re-armed from the saved table.
    - Otherwise, or with no actor: NO_OP with no mutation.
    """
    if actor is None:
        return RefillAction.NO_OP

    record = container.record

    if record.original_table is not None:
        record.last_refill_time = now
        record.mark_looted(actor.uuid)
        record.promote_live_table()
        return RefillAction.POP_ORIGINAL

    if record.saved_table is None:
        return RefillAction.NO_OP

    empty = container.is_empty() or record.policy.refill_full
    if not (empty and can_refill_for(record, actor, now, has_permission)):
        return RefillAction.NO_OP

    record.mark_looted(actor.uuid)
    seed = actor.next_seed() if record.policy.randomize_loot_seed else record.saved_seed
    container.set_loot_table(record.saved_table, seed)
    record.last_refill_time = now
    record.refill_count += 1
    return RefillAction.REFILL
