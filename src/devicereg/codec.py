"""
JSON codec for device registration responses.

Wire format: a JSON object with the mandatory nested "request" object and
the optional string keys "code", "activation_code" and "state". Absent
fields are omitted on encode and decode back to None.
"""

import json
from typing import Any

from pydantic import ValidationError

from devicereg.config import get_settings
from devicereg.core.logging import logger
from devicereg.errors import MalformedResponseError
from devicereg.models.registration_request import DeviceRegistrationRequest
from devicereg.models.registration_response import (
    KEY_ACTIVATION_CODE,
    KEY_CODE,
    KEY_REQUEST,
    KEY_STATE,
    DeviceRegistrationResponse,
)


def serialize_response(response: DeviceRegistrationResponse) -> str:
    """
    Serialize a registration response to wire text.

    Args:
        response: Response to serialize

    Returns:
        str: JSON object text
    """
    payload: dict[str, Any] = {KEY_REQUEST: response.request.serialize()}
    payload.update(
        response.model_dump(by_alias=True, exclude_none=True, exclude={"request"})
    )
    return json.dumps(payload)


def deserialize_response(
    text: str | bytes, *, require_codes: bool | None = None
) -> DeviceRegistrationResponse:
    """
    Parse wire text produced by serialize_response().

    Args:
        text: JSON object text
        require_codes: Fail when "code" or "activation_code" is missing.
            Defaults to the REQUIRE_CODES_ON_DECODE setting.

    Returns:
        DeviceRegistrationResponse: Decoded response

    Raises:
        MalformedResponseError: If the text is not valid JSON, lacks the
            request, carries an invalid request or field, or misses a
            required code
    """
    if require_codes is None:
        require_codes = get_settings().require_codes_on_decode

    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Registration response is not valid JSON: {e}")
        raise MalformedResponseError("registration response is not valid JSON") from e

    if not isinstance(data, dict):
        raise MalformedResponseError("registration response must be a JSON object")

    if KEY_REQUEST not in data:
        raise MalformedResponseError(
            "registration request not provided and not found in JSON"
        )

    raw_request = data[KEY_REQUEST]
    if not isinstance(raw_request, dict):
        raise MalformedResponseError("registration request must be a JSON object")

    try:
        request = DeviceRegistrationRequest.deserialize(raw_request)
    except ValidationError as e:
        logger.warning(
            f"Embedded registration request is invalid ({e.error_count()} errors)"
        )
        raise MalformedResponseError("embedded registration request is invalid") from e

    if require_codes:
        missing = [
            key for key in (KEY_CODE, KEY_ACTIVATION_CODE) if data.get(key) is None
        ]
        if missing:
            raise MalformedResponseError(
                f"registration response is missing required fields: {missing}"
            )

    try:
        response = DeviceRegistrationResponse.model_validate(
            {
                KEY_REQUEST: request,
                KEY_CODE: data.get(KEY_CODE),
                KEY_ACTIVATION_CODE: data.get(KEY_ACTIVATION_CODE),
                KEY_STATE: data.get(KEY_STATE),
            }
        )
    except ValidationError as e:
        raise MalformedResponseError(
            "registration response carries invalid field values"
        ) from e

    logger.debug("Decoded registration response from wire text")
    return response
