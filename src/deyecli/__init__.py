"""
deyecli - Deye Cloud API command-line client.

Obtains and stores an access token, then reads battery/system
configuration, updates battery parameters and fetches station and
device telemetry from the Deye Cloud developer API.

Usage:
    # CLI (recommended)
    deyecli token
    deyecli config-battery 2401110313

    # Programmatic
    from deyecli.application.container import Container

    container = Container()
    settings = container.settings()
"""

__version__ = "0.1.0"
__author__ = "deyecli contributors"

__all__ = ["__version__"]
