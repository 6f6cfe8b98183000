"""Refill policy models: the tunables that govern refill eligibility.

Field aliases match the camelCase keys used in the config file.
"""

from pydantic import BaseModel, Field

UNLIMITED_REFILLS = -1


class RefillPolicy(BaseModel):
    """Resolved refill tunables for one container.

    Read-only once resolved; build a new policy with `model_copy(update=...)`.
    """

    max_refills: int = Field(default=UNLIMITED_REFILLS, alias="maxRefills")
    min_wait_time: int = Field(default=0, alias="minWaitTime")  # seconds
    refill_full: bool = Field(default=False, alias="refillFull")
    randomize_loot_seed: bool = Field(default=True, alias="randomizeLootSeed")
    allow_reloot_by_default: bool = Field(default=False, alias="allowRelootByDefault")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def min_wait_millis(self) -> int:
        return self.min_wait_time * 1000


class PolicyOverride(BaseModel):
    """Partial policy: only the fields that are set replace resolved values."""

    max_refills: int | None = Field(default=None, alias="maxRefills")
    min_wait_time: int | None = Field(default=None, alias="minWaitTime")
    refill_full: bool | None = Field(default=None, alias="refillFull")
    randomize_loot_seed: bool | None = Field(default=None, alias="randomizeLootSeed")
    allow_reloot_by_default: bool | None = Field(
        default=None, alias="allowRelootByDefault"
    )

    model_config = {"populate_by_name": True, "frozen": True}

    def apply_to(self, policy: RefillPolicy) -> RefillPolicy:
        """Return `policy` with every explicitly set field replaced."""
        return policy.model_copy(update=self.model_dump(exclude_none=True))
