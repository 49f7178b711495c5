"""Exceptions raised by the ARM client."""

from __future__ import annotations


class ArmError(Exception):
    """Base class for every error raised by :mod:`az_arm`."""


class AuthenticationError(ArmError):
    """The identity endpoint did not hand out a bearer token."""


class ApiError(ArmError):
    """A Resource Manager call returned a non-success status.

    ``message`` is ``error.message`` from the provider's error envelope when
    it could be decoded, otherwise the raw response body.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class RetryableError(ApiError):
    """A PUT/POST failed with a transient conflict; the same request may be resent."""


class UnknownLocationError(ArmError, LookupError):
    """The location is not offered to the subscription."""


class UnknownResourceGroupError(ArmError, LookupError):
    """The resource group does not exist in the subscription."""
