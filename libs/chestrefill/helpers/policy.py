"""Policy resolution: global defaults -> per-table override -> instance override."""

from collections.abc import Mapping

from chestrefill.models.policy import PolicyOverride, RefillPolicy
from chestrefill.models.table_ref import TableRef


def find_table_override(
    table: TableRef, table_overrides: Mapping[str, PolicyOverride]
) -> PolicyOverride | None:
    """Look up a table override by full identifier, falling back to the bare path."""
    override = table_overrides.get(str(table))
    if override is None:
        override = table_overrides.get(table.path)
    return override


def resolve_policy(
    defaults: RefillPolicy,
    table: TableRef | None,
    instance_override: RefillPolicy | None = None,
    *,
    table_overrides: Mapping[str, PolicyOverride] | None = None,
) -> RefillPolicy:
    """Merge the three configuration layers into one effective policy.

    Args:
        defaults: Global default policy.
        table: The container's loot table, used to find a table-level override.
        instance_override: Values persisted on the container itself. When
            present, every field wins over the table-level values.
        table_overrides: Table identifier (or bare path) -> partial override.

    Returns:
        The resolved policy.
    """
    policy = defaults
    if table is not None and table_overrides:
        override = find_table_override(table, table_overrides)
        if override is not None:
            policy = override.apply_to(policy)
    if instance_override is not None:
        policy = instance_override
    return policy
