"""Actors: the players who open containers."""

from dataclasses import dataclass, field
from random import Random

INT64_MIN = -(2**63)


@dataclass
class Actor:
    """A player identity plus its own randomness source."""

    uuid: str
    rng: Random = field(default_factory=Random, repr=False, compare=False)

    def next_seed(self) -> int:
        """Draw a fresh signed 64-bit loot seed from this actor's random source."""
        return self.rng.getrandbits(64) + INT64_MIN
