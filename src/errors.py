"""Error taxonomy for the gateway.

Every error carries the HTTP status it maps to and a message that is safe
to return to the caller. Remote detail stays in the logs.
"""


class GatewayError(Exception):
    """Base class for errors that terminate a request."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationMissing(GatewayError):
    """A required collection ID or credential is not configured."""

    status_code = 500


class ValidationFailed(GatewayError):
    """Required input is absent or maps to nothing writable."""

    status_code = 400


class RemoteFailure(GatewayError):
    """The remote store call failed."""

    status_code = 500

    def __init__(self, message: str, operation: str = None, remote_status: int = None):
        super().__init__(message)
        self.operation = operation
        self.remote_status = remote_status


class RemoteUnavailable(RemoteFailure):
    """Network, timeout, auth or server-side failure."""


class RemoteRejected(RemoteFailure):
    """The remote schema rejected the request payload."""
