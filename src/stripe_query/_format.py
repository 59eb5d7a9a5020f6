"""Value rendering shared by clause serialization and search parameters."""

from __future__ import annotations

from datetime import datetime, timezone

ScalarValue = str | bool | int | float
CustomValue = ScalarValue | list[ScalarValue]


def format_value(value: ScalarValue) -> str:
    """Render a scalar the way the search grammar spells it.

    Booleans become ``true``/``false``; everything else uses ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_timestamp(value: int | datetime) -> int:
    """Convert a datetime to integer unix seconds. Integers pass through.

    Naive datetimes are read as UTC, so the result does not depend on the host.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return value
