"""Loot table identifiers in `namespace:path` form."""

import re
from dataclasses import dataclass

from chestrefill.errors import MalformedRecordError

DEFAULT_NAMESPACE = "minecraft"

_NAMESPACE_RE = re.compile(r"[a-z0-9_.-]+")
_PATH_RE = re.compile(r"[a-z0-9_./-]+")


@dataclass(frozen=True)
class TableRef:
    """A reference to a loot table, e.g. `minecraft:chests/simple_dungeon`."""

    namespace: str
    path: str

    @classmethod
    def parse(cls, value: str) -> "TableRef":
        """Parse an identifier string.

        A bare path (no `:`) falls back to the `minecraft` namespace.

        Raises:
            MalformedRecordError: If the string is empty or has invalid characters.
        """
        if not value:
            raise MalformedRecordError("Loot table identifier must not be empty")

        namespace, sep, path = value.partition(":")
        if not sep:
            namespace, path = DEFAULT_NAMESPACE, value
        elif not namespace:
            namespace = DEFAULT_NAMESPACE

        if not _NAMESPACE_RE.fullmatch(namespace):
            raise MalformedRecordError(
                f"Non [a-z0-9_.-] character in namespace of loot table {value!r}"
            )
        if not _PATH_RE.fullmatch(path):
            raise MalformedRecordError(
                f"Non [a-z0-9/._-] character in path of loot table {value!r}"
            )
        return cls(namespace=namespace, path=path)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"
