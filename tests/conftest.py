"""Global pytest configuration and fixtures for all tests."""

import os

import pytest

from devicereg.models import (
    AuthorizationServiceConfiguration,
    DeviceRegistrationRequest,
)


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    Settings created inside tests (Settings()) pick these up; the cached
    module-level settings are not affected.
    """
    original_env = {}

    test_env_vars = {
        "LOG_LEVEL": "DEBUG",
        "REQUIRE_CODES_ON_DECODE": "false",
        "STATE_LENGTH": "32",
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value


@pytest.fixture
def configuration():
    """Authorization server configuration with a registration endpoint."""
    return AuthorizationServiceConfiguration(
        authorization_endpoint="https://idm.example.com/SAAS/auth/oauth2/authorize",
        token_endpoint="https://idm.example.com/SAAS/auth/oauthtoken",
        registration_endpoint="https://idm.example.com/SAAS/auth/device/register",
    )


@pytest.fixture
def registration_request(configuration):
    """Registration request with a fixed state."""
    return DeviceRegistrationRequest(
        configuration=configuration,
        redirect_uri="devicereg://oauth-callback",
        template="mobile-template",
        device_name="Pixel 8",
        user_device="device-1234",
        state="xyz",
    )
