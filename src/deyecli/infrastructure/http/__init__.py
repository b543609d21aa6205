"""
HTTP transport for the Deye Cloud API.
"""

from .client import JSON_HEADERS, DeyeCloudClient

__all__ = ["DeyeCloudClient", "JSON_HEADERS"]
