from .sensors import group_features_by_sensor, sensor_of

__all__ = ["group_features_by_sensor", "sensor_of"]
