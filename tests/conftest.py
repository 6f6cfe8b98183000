"""Shared test fixtures."""

import pytest
from chestrefill import Actor, RefillConfig, TableRef

DUNGEON = "minecraft:chests/simple_dungeon"


class FakeClock:
    """Settable millisecond clock for driving cooldowns."""

    def __init__(self, now: int = 1_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance_seconds(self, seconds: float) -> None:
        self.now += int(seconds * 1000)


def fake_loot(table: TableRef, seed: int, actor: Actor | None) -> list[str]:
    """Deterministic stand-in for the host's loot generator."""
    return [f"{table.path}#{seed}"]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def dungeon() -> TableRef:
    return TableRef.parse(DUNGEON)


@pytest.fixture
def alice() -> Actor:
    return Actor("00000000-0000-0000-0000-00000000000a")


@pytest.fixture
def bob() -> Actor:
    return Actor("00000000-0000-0000-0000-00000000000b")


@pytest.fixture
def config() -> RefillConfig:
    return RefillConfig.model_validate(
        {
            "defaultProperties": {"maxRefills": 3, "minWaitTime": 60},
            "lootModifierMap": {DUNGEON: {"maxRefills": 1}},
        }
    )


@pytest.fixture
def loot_generator():
    return fake_loot
