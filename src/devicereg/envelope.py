"""
Transport envelope adapter.

An envelope is any mutable string-keyed mapping used to carry a response
across a process or UI boundary. The response travels as wire text under a
single well-known entry.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any

from devicereg.codec import deserialize_response, serialize_response
from devicereg.core.logging import logger
from devicereg.errors import (
    InvalidArgumentError,
    InvalidEnvelopeContentError,
    MalformedResponseError,
)
from devicereg.models.registration_response import DeviceRegistrationResponse

ENVELOPE_KEY = "com.vmware.idm.DeviceRegistrationResponse"


def to_envelope(
    response: DeviceRegistrationResponse,
    envelope: MutableMapping[str, Any] | None = None,
) -> MutableMapping[str, Any]:
    """
    Store a response in an envelope.

    Args:
        response: Response to attach
        envelope: Existing carrier to write into (a new dict if omitted)

    Returns:
        The carrier holding the serialized response
    """
    carrier: MutableMapping[str, Any] = {} if envelope is None else envelope
    carrier[ENVELOPE_KEY] = serialize_response(response)
    return carrier


def from_envelope(
    envelope: Mapping[str, Any] | None, *, require_codes: bool | None = None
) -> DeviceRegistrationResponse | None:
    """
    Extract a response stored by to_envelope().

    Args:
        envelope: Carrier received from the transport
        require_codes: Passed through to the codec

    Returns:
        The decoded response, or None if no response was attached

    Raises:
        InvalidArgumentError: If envelope is None
        InvalidEnvelopeContentError: If the attached entry cannot be decoded
    """
    if envelope is None:
        raise InvalidArgumentError("envelope must not be None")

    if ENVELOPE_KEY not in envelope:
        logger.debug("Envelope carries no registration response")
        return None

    content = envelope[ENVELOPE_KEY]
    if not isinstance(content, str | bytes):
        raise InvalidEnvelopeContentError(
            "envelope contains malformed registration response"
        )

    try:
        return deserialize_response(content, require_codes=require_codes)
    except MalformedResponseError as e:
        logger.warning(f"Envelope contains malformed registration response: {e}")
        raise InvalidEnvelopeContentError(
            "envelope contains malformed registration response"
        ) from e
