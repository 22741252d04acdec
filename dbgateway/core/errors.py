"""Error taxonomy for the table gateway.

- ConfigurationError: Supabase credentials missing when the client is first built
- BackendError: anything Supabase/PostgREST reports for a single operation
- ValidationError: required request input absent (raised by route handlers only)
"""

from typing import Any, Dict, Optional

from postgrest import APIError

MISSING_CREDENTIALS_MESSAGE = (
    "Missing Supabase credentials. Please set SUPABASE_URL and SUPABASE_KEY environment variables."
)


class GatewayError(Exception):
    """Base class for every error raised by the gateway."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GatewayError):
    """Supabase credentials are missing. Fatal for the process."""

    def __init__(self, message: str = MISSING_CREDENTIALS_MESSAGE):
        super().__init__(message)


class ValidationError(GatewayError):
    """Required request input is absent or malformed."""


class BackendError(GatewayError):
    """Opaque failure reported by the backend.

    The backend message is kept as-is; code, details and hint are carried along
    when PostgREST provides them.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[str] = None,
        hint: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details
        self.hint = hint
        self.payload = payload or {}

    @classmethod
    def from_exception(cls, error: Exception) -> "BackendError":
        """Wrap a postgrest APIError or transport error without altering its message."""
        if isinstance(error, BackendError):
            return error

        if isinstance(error, APIError):
            code = str(error.code) if error.code is not None else None
            return cls(
                message=error.message or str(error),
                code=code,
                details=error.details,
                hint=error.hint,
                payload=error.json(),
            )

        return cls(message=str(error) or error.__class__.__name__)
