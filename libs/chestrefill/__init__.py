"""Chest Refill: loot container refill engine."""

from chestrefill.config import CONFIG_ENV_VAR, RefillConfig, load_config
from chestrefill.container import RefillableContainer
from chestrefill.engine import (
    RELOOT_PERMISSION,
    PermissionChecker,
    PermissionTable,
    RefillAction,
    RefillEngine,
    Refillable,
    can_still_refill,
    default_permission,
    has_enough_time_passed,
    has_reloot_permission,
    on_access,
)
from chestrefill.errors import ChestRefillError, ConfigError, MalformedRecordError
from chestrefill.helpers.policy import find_table_override, resolve_policy
from chestrefill.helpers.serializer import deserialize, save_to_tag, serialize
from chestrefill.models import (
    REFILL_TAG_KEY,
    UNLIMITED_REFILLS,
    Actor,
    LootRecord,
    PolicyOverride,
    RefillPolicy,
    TableRef,
)

__all__ = [
    # Config
    "CONFIG_ENV_VAR",
    "RefillConfig",
    "load_config",
    # Engine
    "PermissionChecker",
    "PermissionTable",
    "RELOOT_PERMISSION",
    "RefillAction",
    "RefillEngine",
    "Refillable",
    "RefillableContainer",
    "can_still_refill",
    "default_permission",
    "has_enough_time_passed",
    "has_reloot_permission",
    "on_access",
    # Errors
    "ChestRefillError",
    "ConfigError",
    "MalformedRecordError",
    # Models
    "Actor",
    "LootRecord",
    "PolicyOverride",
    "REFILL_TAG_KEY",
    "RefillPolicy",
    "TableRef",
    "UNLIMITED_REFILLS",
    # Helpers
    "deserialize",
    "find_table_override",
    "resolve_policy",
    "save_to_tag",
    "serialize",
]
