from chestrefill.container.container import DEFAULT_CAPACITY, LootGenerator, RefillableContainer

__all__ = [
    "DEFAULT_CAPACITY",
    "LootGenerator",
    "RefillableContainer",
]
