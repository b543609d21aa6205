from .battery_parameter_command import BatteryParameterCommand
from .device_config_command import BatteryConfigCommand, DeviceConfigCommand, SystemConfigCommand

__all__ = [
    "BatteryConfigCommand",
    "BatteryParameterCommand",
    "DeviceConfigCommand",
    "SystemConfigCommand",
]
