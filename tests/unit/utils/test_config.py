"""Unit tests for configuration utilities in config.py."""

import json
from io import BytesIO
from typing import cast
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from pytest import MonkeyPatch

from kvshortener.types import LambdaConfiguration
from kvshortener.utils import config
from kvshortener.constants import ENV, RedirectCountingMode
from kvshortener.exceptions import BadConfigurationError, MissingEnvironmentVariableError


class TestConfigUtilities:
    appconfig_payload: dict
    appconfig_client: MagicMock

    @pytest.fixture
    def appconfig_payload(self) -> dict:
        # fmt: off
        return {
            'build': 42,
            'active_backend': 'redis',
            'redirect_counting': 'cell',
            'configs': {
                'test_lambda': {
                    'redis': {
                        'host': 'monkey',
                        'port': 659595,
                        'db': 3
                    }
                }
            },
        }
        # fmt: on

    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch: MonkeyPatch, appconfig_payload: dict) -> None:
        monkeypatch.setenv(ENV.App.APP_ENV, 'test')
        monkeypatch.delenv(ENV.App.AWS_SAM_LOCAL, raising=False)
        monkeypatch.delenv(ENV.AppConfig.AGENT_URL, raising=False)
        monkeypatch.setenv(ENV.AppConfig.APP_ID, 'app123')
        monkeypatch.setenv(ENV.AppConfig.ENV_ID, 'env123')
        monkeypatch.setenv(ENV.AppConfig.PROFILE_ID, 'prof123')

        self.appconfig_payload = appconfig_payload
        self.appconfig_client = MagicMock()
        self.appconfig_client.start_configuration_session.return_value = {'InitialConfigurationToken': 'monkey_token'}
        self.appconfig_client.get_latest_configuration.side_effect = lambda **kw: {
            'Configuration': BytesIO(json.dumps(self.appconfig_payload).encode('utf-8'))
        }
        monkeypatch.setattr(config.boto3, 'client', lambda service: self.appconfig_client)

    def test_load_config(self) -> None:
        result = config.load_config('test_lambda')

        assert result == cast(
            LambdaConfiguration,
            {'redis': {'host': 'monkey', 'port': 659595, 'db': 3}, 'redirect_counting': RedirectCountingMode.CELL},
        )
        self.appconfig_client.start_configuration_session.assert_called_once_with(
            ApplicationIdentifier='app123',
            EnvironmentIdentifier='env123',
            ConfigurationProfileIdentifier='prof123',
        )
        self.appconfig_client.get_latest_configuration.assert_called_once_with(ConfigurationToken='monkey_token')

    def test_load_config_defaults_to_embedded_counting(self) -> None:
        del self.appconfig_payload['redirect_counting']

        assert config.load_config('test_lambda')['redirect_counting'] == RedirectCountingMode.EMBEDDED

    def test_load_config_with_unknown_counting_mode(self) -> None:
        self.appconfig_payload['redirect_counting'] = 'eventually'

        with pytest.raises(BadConfigurationError, match="Unknown redirect counting mode 'eventually'"):
            config.load_config('test_lambda')

    def test_load_config_for_unknown_lambda(self) -> None:
        with pytest.raises(BadConfigurationError, match="no 'other_lambda' backend section"):
            config.load_config('other_lambda')

    def test_load_config_requires_appconfig_identifiers(self, monkeypatch: MonkeyPatch) -> None:
        monkeypatch.delenv(ENV.AppConfig.PROFILE_ID)

        with pytest.raises(MissingEnvironmentVariableError, match="'APPCONFIG_PROFILE_ID'"):
            config.load_config('test_lambda')

    def test_missing_appconfig_raises_error(self) -> None:
        self.appconfig_client.start_configuration_session.side_effect = ClientError(
            {'Error': {'Code': 'ResourceNotFoundException'}}, 'StartConfigurationSession'
        )

        with pytest.raises(ClientError):
            config.load_config('test_lambda')


@pytest.mark.parametrize(
    'name, env, expected',
    [
        ('kvshortener', 'prod', 'kvshortener:prod'),
        ('kvshortener', 'DEV', 'kvshortener:dev'),
        (None, 'prod', None),
    ],
)
def test_app_prefix(monkeypatch: MonkeyPatch, name: str | None, env: str, expected: str | None) -> None:
    if name is None:
        monkeypatch.delenv(ENV.App.APP_NAME, raising=False)
    else:
        monkeypatch.setenv(ENV.App.APP_NAME, name)
    monkeypatch.setenv(ENV.App.APP_ENV, env)

    assert config.app_prefix() == expected


def test_app_env_defaults_to_local(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.delenv(ENV.App.APP_ENV, raising=False)
    assert config.app_env() == 'local'


@pytest.mark.parametrize(
    'url',
    [
        'ftp://appconfig-agent:2772',
        'http://evil.example.com:2772',
        'http://localhost:8080',
    ],
)
def test_validate_agent_url_rejects_unsafe_urls(url: str) -> None:
    with pytest.raises(BadConfigurationError):
        config._validate_agent_url(url)


def test_validate_agent_url_accepts_local_agent() -> None:
    assert config._validate_agent_url('http://appconfig-agent:2772') == 'http://appconfig-agent:2772'
    assert config._validate_agent_url(None) == ''
