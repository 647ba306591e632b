"""
Exceptions raised by the device registration flow.

Parsing and codec failures surface as MalformedResponseError; missing
handles at call boundaries as InvalidArgumentError; unmet operation
preconditions as InvalidStateError. An absent optional field is never an
error.
"""


class DeviceRegistrationError(Exception):
    """Base class for all device registration errors."""


class MalformedResponseError(DeviceRegistrationError, ValueError):
    """Wire text is not a valid serialized registration response."""


class InvalidEnvelopeContentError(MalformedResponseError):
    """The envelope carries a response entry that cannot be decoded."""


class InvalidArgumentError(DeviceRegistrationError, ValueError):
    """A required handle was missing at a call boundary."""


class InvalidStateError(DeviceRegistrationError, RuntimeError):
    """An operation's precondition does not hold for this response."""


__all__ = [
    "DeviceRegistrationError",
    "InvalidArgumentError",
    "InvalidEnvelopeContentError",
    "InvalidStateError",
    "MalformedResponseError",
]
