from .device_latest_command import DeviceLatestCommand

__all__ = ["DeviceLatestCommand"]
