"""Tests for the registration response JSON codec."""

import json
from unittest.mock import patch

import pytest

from devicereg.codec import deserialize_response, serialize_response
from devicereg.config import Settings
from devicereg.errors import MalformedResponseError
from devicereg.models import DeviceRegistrationRequest, DeviceRegistrationResponse


@pytest.mark.parametrize(
    "fields",
    [
        {},
        {"authorization_code": "abc"},
        {"activation_code": "act-1", "state": "xyz"},
        {"authorization_code": "abc", "activation_code": "act-1", "state": "xyz"},
    ],
)
def test_round_trip(registration_request, fields):
    """Test decode(encode(response)) equals the original response."""
    response = DeviceRegistrationResponse(request=registration_request, **fields)

    decoded = deserialize_response(serialize_response(response))

    assert decoded == response


def test_serialize_uses_wire_keys(registration_request):
    """Test the wire format keys."""
    response = DeviceRegistrationResponse(
        request=registration_request,
        authorization_code="abc",
        activation_code="act-1",
        state="xyz",
    )

    data = json.loads(serialize_response(response))

    assert set(data) == {"request", "code", "activation_code", "state"}
    assert data["code"] == "abc"
    assert data["activation_code"] == "act-1"
    assert data["request"] == registration_request.serialize()


def test_serialize_omits_absent_fields(registration_request):
    """Test absent fields are omitted instead of written as null."""
    response = DeviceRegistrationResponse(
        request=registration_request, authorization_code="abc"
    )

    data = json.loads(serialize_response(response))

    assert set(data) == {"request", "code"}


def test_serialize_keeps_empty_string(registration_request):
    """Test an empty code is present, not omitted."""
    response = DeviceRegistrationResponse(
        request=registration_request, activation_code=""
    )

    data = json.loads(serialize_response(response))

    assert data["activation_code"] == ""


def test_deserialize_missing_keys_are_none(registration_request):
    """Test keys absent from the wire text decode to None."""
    text = json.dumps({"request": registration_request.serialize()})

    response = deserialize_response(text)

    assert response.authorization_code is None
    assert response.activation_code is None
    assert response.state is None


def test_deserialize_null_is_absent(registration_request):
    """Test explicit nulls decode to None."""
    text = json.dumps({"request": registration_request.serialize(), "code": None})

    assert deserialize_response(text).authorization_code is None


def test_deserialize_missing_request():
    """Test wire text without the request fails."""
    with pytest.raises(MalformedResponseError, match="registration request"):
        deserialize_response(json.dumps({"code": "abc"}))


@pytest.mark.parametrize("text", ["", "not json", "{", "[1, 2]", '"string"', "42"])
def test_deserialize_invalid_json(text):
    """Test non-object or invalid JSON fails."""
    with pytest.raises(MalformedResponseError):
        deserialize_response(text)


def test_deserialize_invalid_json_chains_cause():
    """Test the JSON error is kept as the cause."""
    with pytest.raises(MalformedResponseError) as exc_info:
        deserialize_response("{")

    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_deserialize_request_not_an_object():
    """Test a non-object request fails."""
    with pytest.raises(MalformedResponseError):
        deserialize_response(json.dumps({"request": "abc"}))


def test_deserialize_invalid_nested_request(registration_request):
    """Test a request failing its own validation fails the response."""
    raw_request = registration_request.serialize()
    del raw_request["configuration"]

    with pytest.raises(MalformedResponseError, match="embedded registration request"):
        deserialize_response(json.dumps({"request": raw_request}))


def test_deserialize_non_string_code(registration_request):
    """Test a code of the wrong type fails."""
    text = json.dumps({"request": registration_request.serialize(), "code": 123})

    with pytest.raises(MalformedResponseError):
        deserialize_response(text)


def test_deserialize_ignores_unknown_keys(registration_request):
    """Test unknown keys, including field names, are not read."""
    text = json.dumps(
        {
            "request": registration_request.serialize(),
            "authorization_code": "not-a-wire-key",
            "extra": 1,
        }
    )

    assert deserialize_response(text).authorization_code is None


def test_deserialize_accepts_bytes(registration_request):
    """Test wire text may be passed as UTF-8 bytes."""
    response = DeviceRegistrationResponse(request=registration_request, state="xyz")

    decoded = deserialize_response(serialize_response(response).encode("utf-8"))

    assert decoded == response


def test_deserialize_require_codes(registration_request):
    """Test the strict policy rejects missing codes."""
    text = json.dumps({"request": registration_request.serialize(), "code": "abc"})

    with pytest.raises(MalformedResponseError, match="activation_code"):
        deserialize_response(text, require_codes=True)


def test_deserialize_require_codes_with_both_codes(registration_request):
    """Test the strict policy accepts responses carrying both codes."""
    response = DeviceRegistrationResponse(
        request=registration_request, authorization_code="abc", activation_code="act"
    )

    decoded = deserialize_response(serialize_response(response), require_codes=True)

    assert decoded == response


def test_deserialize_require_codes_from_settings(registration_request):
    """Test the policy defaults to the REQUIRE_CODES_ON_DECODE setting."""
    text = json.dumps({"request": registration_request.serialize()})

    with patch(
        "devicereg.codec.get_settings",
        return_value=Settings(require_codes_on_decode=True),
    ):
        with pytest.raises(MalformedResponseError):
            deserialize_response(text)

        # Explicit argument overrides the setting
        assert deserialize_response(text, require_codes=False).request is not None


def test_round_trip_preserves_stateless_request(configuration):
    """Test a request without state does not gain one when decoded."""
    request = DeviceRegistrationRequest(
        configuration=configuration,
        redirect_uri="devicereg://cb",
        template="t",
        state=None,
    )
    response = DeviceRegistrationResponse(request=request, activation_code="act")

    decoded = deserialize_response(serialize_response(response))

    assert decoded.request.state is None
    assert decoded == response


def test_model_json_helpers(registration_request):
    """Test the convenience methods delegate to the codec."""
    response = DeviceRegistrationResponse(
        request=registration_request, authorization_code="abc"
    )

    assert DeviceRegistrationResponse.from_json(response.to_json()) == response


def test_deserialize_deeply_nested_json():
    """Test over-nested wire text fails as malformed instead of escaping."""
    with pytest.raises(MalformedResponseError) as exc_info:
        deserialize_response("[" * 100000)

    assert isinstance(exc_info.value.__cause__, RecursionError)
