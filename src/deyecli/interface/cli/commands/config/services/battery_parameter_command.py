"""
Battery parameter update command.

Validates the parameter type and value locally, then issues the update
order. Out-of-range values are rejected before any request is made.
"""

import logging
from typing import Optional

from deyecli.domain.api import BATTERY_PARAMETER_UPDATE, ApiResponse
from deyecli.domain.config import Settings
from deyecli.domain.validation import parse_parameter_type, validate_battery_value
from ...base import DEVICE_SN_HINT, ApiCommand

logger = logging.getLogger(__name__)


class BatteryParameterCommand(ApiCommand):
    """
    Set one battery parameter on a device.
    """

    endpoint = BATTERY_PARAMETER_UPDATE

    def execute(
        self,
        settings: Settings,
        param_type: Optional[str],
        value: Optional[str],
        device_sn: Optional[str] = None,
        positional: Optional[str] = None,
    ) -> ApiResponse:
        """
        Validate and send a battery parameter update.

        Args:
            settings: Effective settings
            param_type: --param-type, one of BatteryParameterType
            value: --value, unsigned integer within the parameter's range
            device_sn: --device-sn given to the command
            positional: First positional argument

        Raises:
            MissingParametersError: If token, serial, type or value is missing
            InvalidParameterError: If the type is unknown or the value out of range
        """
        serial = self.resolve_device_sn(settings, device_sn, positional)

        missing = []
        self.check_token(settings, missing)
        if not serial:
            missing.append(DEVICE_SN_HINT)
        if not param_type:
            missing.append("--param-type")
        if not value:
            missing.append("--value")
        self.require(missing)

        parameter = parse_parameter_type(param_type)
        number = validate_battery_value(parameter, value)
        logger.info("Setting %s=%d on %s", parameter.value, number, serial)

        # "paramterType" is the API's own spelling.
        body = {"deviceSn": serial, "paramterType": parameter.value, "value": number}
        return self.send(settings, body)
