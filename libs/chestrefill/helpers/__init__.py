from chestrefill.helpers.policy import find_table_override, resolve_policy
from chestrefill.helpers.serializer import deserialize, save_to_tag, serialize

__all__ = [
    "deserialize",
    "find_table_override",
    "resolve_policy",
    "save_to_tag",
    "serialize",
]
