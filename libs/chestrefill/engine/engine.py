"""RefillEngine: applies the refill rules with a clock and a permission backend."""

import logging
import time
from collections.abc import Callable

from chestrefill.engine.actions import RefillAction
from chestrefill.engine.permissions import PermissionChecker, default_permission
from chestrefill.engine.refillable import Refillable
from chestrefill.engine.rules import on_access
from chestrefill.models.actor import Actor

logger = logging.getLogger(__name__)


def current_time_millis() -> int:
    return time.time_ns() // 1_000_000


class RefillEngine:
    """Decides, on every container open, whether to pop, refill, or do nothing.

    Holds no per-container state: each call reads and writes only the
    LootRecord of the container it is given.
    """

    def __init__(
        self,
        has_permission: PermissionChecker = default_permission,
        clock: Callable[[], int] = current_time_millis,
    ) -> None:
        self._has_permission = has_permission
        self._clock = clock

    def on_access(self, container: Refillable, actor: Actor | None) -> RefillAction:
        """Run the decision table for one access and log the outcome."""
        action = on_access(
            container,
            actor,
            now=self._clock(),
            has_permission=self._has_permission,
        )
        if actor is None:
            return action
        if action == RefillAction.POP_ORIGINAL:
            logger.debug(
                "Popping original loot %s for %s",
                container.record.saved_table,
                actor.uuid,
            )
        elif action == RefillAction.REFILL:
            logger.debug(
                "Refilled %s for %s (refill %d)",
                container.record.saved_table,
                actor.uuid,
                container.record.refill_count,
            )
        return action
