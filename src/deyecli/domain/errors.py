"""
Error taxonomy for deyecli.

Every failure the CLI reports is a DeyeCliError carrying the process
exit code it maps to.
"""


class DeyeCliError(Exception):
    """Base class for errors reported to the user."""

    exit_code = 1


class MissingParametersError(DeyeCliError):
    """One or more required parameters were not supplied."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__("Missing required parameter(s): " + ", ".join(self.missing))


class InvalidParameterError(DeyeCliError):
    """A parameter was supplied with a malformed or out-of-range value."""


class ConfigFileError(DeyeCliError):
    """The config file could not be read or written."""


class TransportError(DeyeCliError):
    """The HTTP request never produced a response (DNS, connect, TLS, timeout)."""

    exit_code = 3
