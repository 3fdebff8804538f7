"""
Tests for the command core exception hierarchy.
"""

import pytest
from mcp_core.common.exceptions import (
    AuthenticationError,
    CommandParseError,
    CommandValidationError,
    ConfigurationError,
    InvalidArgumentError,
    McpCoreError,
    ResourceNotFoundError,
    ServiceUnavailableError,
)


@pytest.mark.parametrize(
    ("error_cls", "status_code"),
    [
        (CommandValidationError, 400),
        (InvalidArgumentError, 400),
        (CommandParseError, 400),
        (ConfigurationError, 400),
        (AuthenticationError, 401),
        (ResourceNotFoundError, 404),
        (ServiceUnavailableError, 503),
    ],
)
def test_status_code_hints(error_cls, status_code):
    error = error_cls()

    assert isinstance(error, McpCoreError)
    assert error.status_code == status_code


def test_base_error_defaults_to_500():
    assert McpCoreError("boom").status_code == 500


def test_to_dict_includes_type_details_and_extras():
    error = ResourceNotFoundError(
        "Vault not found", resource_name="vault1", details={"region": "westus"}
    )

    data = error.to_dict()["error"]

    assert data["message"] == "Vault not found"
    assert data["type"] == "ResourceNotFoundError"
    assert data["details"] == {"region": "westus"}
    assert data["resource_name"] == "vault1"


def test_str_is_the_message():
    assert str(InvalidArgumentError("Bad --count", option_name="count")) == "Bad --count"
