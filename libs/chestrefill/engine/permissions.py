"""Reloot permission checks.

The permission backend is pluggable: anything callable as
`(actor, node, default) -> bool` works. `default` is returned when the
backend has no explicit grant or denial for the actor.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from chestrefill.models.actor import Actor

RELOOT_PERMISSION = "chestrefill.allowReloot"

PermissionChecker = Callable[[Actor, str, bool], bool]


def default_permission(actor: Actor, node: str, default: bool) -> bool:
    """Backend with no grants at all; always falls back to the default."""
    return default


@dataclass
class PermissionTable:
    """In-memory permission backend with explicit per-actor grants and denials."""

    _nodes: dict[str, dict[str, bool]] = field(default_factory=dict)

    def grant(self, actor_id: str, node: str = RELOOT_PERMISSION) -> None:
        self._nodes.setdefault(actor_id, {})[node] = True

    def deny(self, actor_id: str, node: str = RELOOT_PERMISSION) -> None:
        self._nodes.setdefault(actor_id, {})[node] = False

    def clear(self, actor_id: str, node: str = RELOOT_PERMISSION) -> None:
        """Drop an explicit entry so the default applies again."""
        self._nodes.get(actor_id, {}).pop(node, None)

    def __call__(self, actor: Actor, node: str, default: bool) -> bool:
        return self._nodes.get(actor.uuid, {}).get(node, default)
