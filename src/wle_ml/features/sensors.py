import re

from wle_ml.domain.exercise import SENSORS

# Longest names first so "forearm" is not matched as "arm".
_SENSOR_PATTERN = re.compile(
    r"_(" + "|".join(sorted(SENSORS, key=len, reverse=True)) + r")(?:_|$)"
)


def sensor_of(column: str) -> str | None:
    match = _SENSOR_PATTERN.search(column)
    return match.group(1) if match else None


def group_features_by_sensor(columns: list[str]) -> dict[str, list[str]]:
    """Map each sensor to its feature columns; unmatched columns go under "other"."""
    groups = {sensor: [] for sensor in SENSORS}
    for col in columns:
        groups.setdefault(sensor_of(col) or "other", []).append(col)
    return {sensor: cols for sensor, cols in groups.items() if cols}
