"""Refill configuration: global defaults plus per-loot-table overrides.

Built once at startup and passed explicitly to whatever needs it.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from chestrefill.errors import ConfigError
from chestrefill.helpers.policy import find_table_override, resolve_policy
from chestrefill.models.policy import PolicyOverride, RefillPolicy
from chestrefill.models.table_ref import TableRef

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CHESTREFILL_CONFIG"


class RefillConfig(BaseModel):
    """Global refill defaults and the per-table override map.

    Override keys are either full identifiers (`minecraft:chests/simple_dungeon`)
    or bare paths (`chests/simple_dungeon`).
    """

    default_properties: RefillPolicy = Field(
        default_factory=RefillPolicy, alias="defaultProperties"
    )
    loot_modifiers: dict[str, PolicyOverride] = Field(
        default_factory=dict, alias="lootModifierMap"
    )

    model_config = {"populate_by_name": True}

    def table_override(self, table: TableRef) -> PolicyOverride | None:
        """Find the override for a table, by full identifier first, then by path."""
        return find_table_override(table, self.loot_modifiers)

    def policy_for(
        self, table: TableRef | None, instance_override: RefillPolicy | None = None
    ) -> RefillPolicy:
        """Resolve the effective policy for a container with the given table."""
        return resolve_policy(
            self.default_properties,
            table,
            instance_override,
            table_overrides=self.loot_modifiers,
        )


def load_config(path: str | Path | None = None) -> RefillConfig:
    """Load the refill config from a JSON file.

    Falls back to the `CHESTREFILL_CONFIG` environment variable when no path
    is given, and to built-in defaults when neither names an existing file.

    Raises:
        ConfigError: If the file is not valid JSON or doesn't match the schema.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        logger.info("No refill config given, using defaults")
        return RefillConfig()

    config_path = Path(path)
    if not config_path.is_file():
        logger.info("Refill config %s not found, using defaults", config_path)
        return RefillConfig()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
        config = RefillConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid refill config {config_path}: {e}") from e

    logger.info(
        "Loaded refill config from %s (%d table overrides)",
        config_path,
        len(config.loot_modifiers),
    )
    return config
