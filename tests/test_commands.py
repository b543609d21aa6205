"""
Tests for the command services.

Each command runs against a container whose HTTP client is a mock, so
request bodies can be inspected without any network access.
"""

import hashlib
from unittest.mock import Mock

import pytest

from deyecli.application.container import Container
from deyecli.domain.api import ApiResponse
from deyecli.domain.config import Settings
from deyecli.domain.errors import InvalidParameterError, MissingParametersError
from deyecli.interface.cli.commands.account.services import TokenCommand, hash_password
from deyecli.interface.cli.commands.config.services import (
    BatteryConfigCommand,
    BatteryParameterCommand,
    SystemConfigCommand,
)
from deyecli.interface.cli.commands.device.services import DeviceLatestCommand
from deyecli.interface.cli.commands.station.services import StationLatestCommand, StationListCommand


class CommandTestCase:
    """Container with a mocked client and formatters."""

    @pytest.fixture(autouse=True)
    def _container(self, tmp_path):
        self.client = Mock()
        self.client.url_for.return_value = "https://api.example.com/path"
        self.client.post.return_value = ApiResponse(200, '{"success": true}')
        self.config_path = tmp_path / "config"
        self.container = Container(
            config_path=self.config_path,
            environ={},
            client_factory=lambda base_url, timeout: self.client,
        )
        self.responses = Mock()
        self.status = Mock()

    def make(self, command_class):
        return command_class(self.container, responses=self.responses, status=self.status)

    def body(self):
        return self.client.post.call_args.args[1]


class TestTokenCommand(CommandTestCase):
    """Test cases for TokenCommand."""

    def credentials(self, **overrides):
        values = {"app_id": "app", "app_secret": "secret", "password": "pw", "email": "me@x.y"}
        values.update(overrides)
        return Settings(**values)

    def test_hash_password(self):
        """Test the password hash is lowercase SHA-256 hex."""
        assert hash_password("pw") == hashlib.sha256(b"pw").hexdigest()

    def test_missing_password_and_identifier_reported_together(self):
        """Test all missing credentials are collected before failing."""
        command = self.make(TokenCommand)

        with pytest.raises(MissingParametersError) as exc_info:
            command.execute(Settings(app_id="X", app_secret="Y"))

        missing = exc_info.value.missing
        assert len(missing) >= 2
        assert any("DEYE_PASSWORD" in item for item in missing)
        assert any("DEYE_USERNAME" in item for item in missing)
        self.client.post.assert_not_called()

    def test_mobile_requires_country_code(self):
        """Test mobile login needs a country code."""
        command = self.make(TokenCommand)

        with pytest.raises(MissingParametersError) as exc_info:
            command.execute(self.credentials(email=None, mobile="5550100"))

        assert any("DEYE_COUNTRY_CODE" in item for item in exc_info.value.missing)

    def test_body_with_email(self):
        """Test the token body for an e-mail login."""
        self.make(TokenCommand).execute(self.credentials())

        assert self.body() == {
            "appSecret": "secret",
            "password": hash_password("pw"),
            "email": "me@x.y",
        }
        assert self.client.post.call_args.kwargs["params"] == {"appId": "app"}
        assert self.client.post.call_args.kwargs["token"] is None

    def test_body_with_mobile_and_company(self):
        """Test the token body for a mobile login with a company."""
        self.make(TokenCommand).execute(
            self.credentials(email=None, mobile="5550100", country_code="49", company_id="77")
        )

        body = self.body()
        assert body["mobile"] == "5550100"
        assert body["countryCode"] == "49"
        assert body["companyId"] == 77
        assert "email" not in body

    def test_only_one_identifier_sent(self):
        """Test only the highest priority identifier is sent."""
        self.make(TokenCommand).execute(self.credentials(username="user", mobile="555"))

        body = self.body()
        assert body["username"] == "user"
        assert "email" not in body
        assert "mobile" not in body

    def test_non_numeric_company_id_rejected_before_request(self):
        """Test a non-numeric company id fails before sending."""
        with pytest.raises(InvalidParameterError):
            self.make(TokenCommand).execute(self.credentials(company_id="acme"))
        self.client.post.assert_not_called()

    def test_success_saves_token(self):
        """Test the access token is stored without its Bearer prefix."""
        self.client.post.return_value = ApiResponse(
            200, '{"success": true, "accessToken": "Bearer abc123"}'
        )

        self.make(TokenCommand).execute(self.credentials())

        assert self.config_path.read_text() == "DEYE_TOKEN=abc123\n"
        self.status.display_token_saved.assert_called_once_with("DEYE_TOKEN", self.config_path)

    def test_failure_does_not_touch_config(self):
        """Test an unsuccessful login leaves the config file alone."""
        self.client.post.return_value = ApiResponse(
            200, '{"success": false, "msg": "auth failed", "accessToken": "nope"}'
        )

        self.make(TokenCommand).execute(self.credentials())

        assert not self.config_path.exists()
        self.responses.display_response.assert_called_once()

    def test_success_without_token_warns(self):
        """Test a success response lacking a token only warns."""
        self.client.post.return_value = ApiResponse(200, '{"success": true}')

        self.make(TokenCommand).execute(self.credentials())

        assert not self.config_path.exists()
        self.status.display_warning.assert_called_once()

    def test_client_closed(self):
        """Test the HTTP client is closed after the request."""
        self.make(TokenCommand).execute(self.credentials())
        self.client.close.assert_called_once()


class TestDeviceCommands(CommandTestCase):
    """Test cases for the device config and latest-data commands."""

    def test_missing_token_and_serial(self):
        """Test token and serial are reported missing together."""
        with pytest.raises(MissingParametersError) as exc_info:
            self.make(BatteryConfigCommand).execute(Settings())

        assert exc_info.value.missing == [
            "DEYE_TOKEN / --token",
            "device serial number (DEYE_DEVICE_SN / --device-sn / positional arg)",
        ]
        self.client.post.assert_not_called()

    def test_config_battery_body(self):
        """Test the config-battery request body."""
        self.make(BatteryConfigCommand).execute(Settings(token="t"), positional="SN1")

        assert self.body() == {"deviceSn": "SN1"}
        assert self.client.post.call_args.kwargs["token"] == "t"

    def test_serial_precedence(self):
        """Test --device-sn beats the positional, which beats settings."""
        settings = Settings(token="t", device_sn="from-settings")

        self.make(SystemConfigCommand).execute(settings, device_sn="from-flag", positional="from-arg")
        assert self.body() == {"deviceSn": "from-flag"}

        self.make(SystemConfigCommand).execute(settings, positional="from-arg")
        assert self.body() == {"deviceSn": "from-arg"}

        self.make(SystemConfigCommand).execute(settings)
        assert self.body() == {"deviceSn": "from-settings"}

    def test_device_latest_body(self):
        """Test device-latest sends a one-element device list."""
        self.make(DeviceLatestCommand).execute(Settings(token="t", device_sn="SN9"))
        assert self.body() == {"deviceList": ["SN9"]}


class TestBatteryParameterCommand(CommandTestCase):
    """Test cases for BatteryParameterCommand."""

    def test_body_uses_api_spelling(self):
        """Test the body keeps the API's paramterType spelling."""
        self.make(BatteryParameterCommand).execute(
            Settings(token="t"), param_type="BATT_LOW", value="100", positional="SN1"
        )

        assert self.body() == {"deviceSn": "SN1", "paramterType": "BATT_LOW", "value": 100}

    def test_out_of_range_rejected_before_request(self):
        """Test an out of range value fails before sending."""
        with pytest.raises(InvalidParameterError, match="101"):
            self.make(BatteryParameterCommand).execute(
                Settings(token="t", device_sn="SN1"), param_type="BATT_LOW", value="101"
            )
        self.client.post.assert_not_called()

    def test_unknown_type_rejected(self):
        """Test an unknown parameter type lists valid values."""
        with pytest.raises(InvalidParameterError, match="Valid values"):
            self.make(BatteryParameterCommand).execute(
                Settings(token="t", device_sn="SN1"), param_type="VOLTS", value="1"
            )

    def test_all_missing_reported(self):
        """Test all four missing parameters are reported."""
        with pytest.raises(MissingParametersError) as exc_info:
            self.make(BatteryParameterCommand).execute(Settings(), param_type=None, value=None)

        assert len(exc_info.value.missing) == 4


class TestStationCommands(CommandTestCase):
    """Test cases for the station commands."""

    def test_station_list_body(self):
        """Test station-list sends an empty body."""
        self.make(StationListCommand).execute(Settings(token="t"))
        assert self.body() == {}

    def test_station_list_requires_token(self):
        """Test station-list needs a token."""
        with pytest.raises(MissingParametersError):
            self.make(StationListCommand).execute(Settings())

    def test_station_latest_numeric_body(self):
        """Test the station id is sent as a number."""
        self.make(StationLatestCommand).execute(Settings(token="t"), positional="12345")
        assert self.body() == {"stationId": 12345}

    def test_station_latest_rejects_non_numeric(self):
        """Test a non-numeric station id fails before sending."""
        with pytest.raises(InvalidParameterError):
            self.make(StationLatestCommand).execute(Settings(token="t", station_id="abc"))
        self.client.post.assert_not_called()

    def test_station_latest_missing_id(self):
        """Test a missing station id is reported."""
        with pytest.raises(MissingParametersError) as exc_info:
            self.make(StationLatestCommand).execute(Settings(token="t"))
        assert exc_info.value.missing == [
            "station id (DEYE_STATION_ID / --station-id / positional arg)"
        ]
