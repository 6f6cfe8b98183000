"""Outcomes of a container access."""

from enum import StrEnum


class RefillAction(StrEnum):
    """What the engine decided to do for one access."""

    POP_ORIGINAL = "pop_original"
    REFILL = "refill"
    NO_OP = "no_op"
