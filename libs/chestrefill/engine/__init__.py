"""Refill decision engine."""

from chestrefill.engine.actions import RefillAction
from chestrefill.engine.engine import RefillEngine, current_time_millis
from chestrefill.engine.permissions import (
    RELOOT_PERMISSION,
    PermissionChecker,
    PermissionTable,
    default_permission,
)
from chestrefill.engine.refillable import Refillable
from chestrefill.engine.rules import (
    can_refill_for,
    can_still_refill,
    has_enough_time_passed,
    has_reloot_permission,
    on_access,
)

__all__ = [
    "PermissionChecker",
    "PermissionTable",
    "RELOOT_PERMISSION",
    "RefillAction",
    "RefillEngine",
    "Refillable",
    "can_refill_for",
    "can_still_refill",
    "current_time_millis",
    "default_permission",
    "has_enough_time_passed",
    "has_reloot_permission",
    "on_access",
]
