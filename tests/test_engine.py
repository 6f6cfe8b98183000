"""Tests for RefillEngine: clock and permission wiring, logging."""

import logging

from chestrefill import PermissionTable, RefillAction, RefillEngine, RefillPolicy, TableRef
from chestrefill.container import RefillableContainer
from chestrefill.engine import current_time_millis


def _popped_container(loot_generator, engine: RefillEngine, alice) -> RefillableContainer:
    container = RefillableContainer(loot_generator, engine=engine)
    container.assign_loot_table(TableRef.parse("chests/simple_dungeon"), 1)
    container.unpack_loot_table(alice)
    container.take_all()
    return container


class TestClock:
    def test_uses_injected_clock(self, loot_generator, clock, alice):
        engine = RefillEngine(clock=clock)
        container = _popped_container(loot_generator, engine, alice)
        assert container.record.last_refill_time == clock.now

    def test_default_clock_is_epoch_millis(self):
        # Sometime after 2020-01-01
        assert current_time_millis() > 1_577_836_800_000


class TestPermissions:
    def test_default_backend_uses_policy_default(self, loot_generator, clock, alice):
        engine = RefillEngine(clock=clock)
        container = _popped_container(loot_generator, engine, alice)
        container.record.policy = RefillPolicy(allow_reloot_by_default=True)
        clock.advance_seconds(1)
        assert engine.on_access(container, alice) == RefillAction.REFILL

    def test_injected_backend_is_consulted(self, loot_generator, clock, alice):
        calls: list = []

        def backend(actor, node, default):
            calls.append((actor.uuid, node, default))
            return True

        engine = RefillEngine(has_permission=backend, clock=clock)
        container = _popped_container(loot_generator, engine, alice)
        clock.advance_seconds(1)
        assert engine.on_access(container, alice) == RefillAction.REFILL
        assert calls == [(alice.uuid, "chestrefill.allowReloot", False)]

    def test_permission_table_clear_restores_default(self, alice):
        permissions = PermissionTable()
        permissions.grant(alice.uuid)
        permissions.clear(alice.uuid)
        assert permissions(alice, "chestrefill.allowReloot", False) is False


class TestLogging:
    def test_pop_and_refill_logged(self, loot_generator, clock, alice, bob, caplog):
        engine = RefillEngine(clock=clock)
        with caplog.at_level(logging.DEBUG, logger="chestrefill.engine.engine"):
            container = _popped_container(loot_generator, engine, alice)
            clock.advance_seconds(1)
            engine.on_access(container, bob)
        assert "Popping original loot" in caplog.text
        assert "Refilled minecraft:chests/simple_dungeon" in caplog.text
