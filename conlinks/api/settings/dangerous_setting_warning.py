"""Warning shown before a dangerous toggle is switched on."""

from typing import Any

from ._constants import DANGEROUS_SETTINGS


def dangerous_setting_warning(record: dict[str, Any], key: str) -> str | None:
    """Return the warning for ``key`` if it is dangerous and enabled in ``record``.

    Args:
        record: Settings record (camelCase keys) holding the value about to be stored
        key: Record key being changed
    """
    setting_name = DANGEROUS_SETTINGS.get(key)
    if setting_name is None or not record.get(key):
        return None
    return (
        f"You enabled {setting_name} setting. Without proper configuration it might lead to "
        "inconvenient attachment rearrangements or even data loss in your vault. "
        "It is STRONGLY recommended to backup your vault before using the plugin."
    )
