"""Schema of the persisted `ChestRefill` record.

Field aliases are the on-disk key names. Always serialize with
`model_dump(by_alias=True)`. A sub-field that is missing or has the
wrong type falls back to its zero value rather than failing the load.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

REFILL_TAG_KEY = "ChestRefill"
LOOT_TABLE_KEY = "LootTable"
LOOT_TABLE_SEED_KEY = "LootTableSeed"


def _zero_on_error(value: Any, handler: Any, zero: Any) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return zero


class CustomValuesTag(BaseModel):
    """Per-container policy override, persisted only when one exists."""

    randomize_loot_seed: bool = Field(default=False, alias="RandomizeLootSeed")
    refill_full: bool = Field(default=False, alias="RefillNonEmpty")
    allow_reloot_by_default: bool = Field(default=False, alias="AllowReloot")
    max_refills: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX, alias="MaxRefills")
    min_wait_time: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX, alias="MinWaitTime")

    model_config = {"populate_by_name": True}

    @field_validator("randomize_loot_seed", "refill_full", "allow_reloot_by_default", mode="wrap")
    @classmethod
    def _bool_or_false(cls, value: Any, handler: Any) -> bool:
        return _zero_on_error(value, handler, False)

    @field_validator("max_refills", "min_wait_time", mode="wrap")
    @classmethod
    def _int_or_zero(cls, value: Any, handler: Any) -> int:
        return _zero_on_error(value, handler, 0)


class RefillTag(BaseModel):
    """The `ChestRefill` record embedded in a container's save data."""

    saved_loot_table: str = Field(default="", alias="SavedLootTable")
    saved_loot_table_seed: int = Field(
        default=0, ge=INT64_MIN, le=INT64_MAX, alias="SavedLootTableSeed"
    )
    refill_counter: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX, alias="RefillCounter")
    last_refill_time: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX, alias="LastRefillTime")
    looted_uuids: list[str] = Field(default_factory=list, alias="LootedUUIDs")
    custom_values: CustomValuesTag | None = Field(default=None, alias="CustomValues")

    model_config = {"populate_by_name": True}

    @field_validator("saved_loot_table", mode="wrap")
    @classmethod
    def _str_or_empty(cls, value: Any, handler: Any) -> str:
        return _zero_on_error(value, handler, "")

    @field_validator(
        "saved_loot_table_seed", "refill_counter", "last_refill_time", mode="wrap"
    )
    @classmethod
    def _int_or_zero(cls, value: Any, handler: Any) -> int:
        return _zero_on_error(value, handler, 0)

    @field_validator("looted_uuids", mode="before")
    @classmethod
    def _scalar_entries_as_str(cls, value: Any) -> list[str]:
        # Each entry is read on its own; only non-scalar entries are dropped
        if not isinstance(value, list):
            return []
        return [str(entry) for entry in value if isinstance(entry, (str, int, float))]

    @field_validator("custom_values", mode="before")
    @classmethod
    def _empty_is_absent(cls, value: Any) -> Any:
        if isinstance(value, CustomValuesTag):
            return value
        # An empty or non-mapping CustomValues entry means no override
        if not isinstance(value, dict) or not value:
            return None
        return value
