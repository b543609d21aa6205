from .station_command import StationLatestCommand, StationListCommand

__all__ = ["StationLatestCommand", "StationListCommand"]
