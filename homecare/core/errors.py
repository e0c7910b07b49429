# core/errors.py
"""
Errors raised by route handlers and the auth gate.

Each class carries the HTTP status it maps to. The handler registered in `main.py`
turns them into `{"message": ..., "error": ...}` JSON bodies.
"""


class ApiError(Exception):
	"""Base class for errors that are reported to the client."""
	status_code: int = 500
	default_message: str = "Internal server error"

	def __init__(self, message: str | None = None, error: str | None = None):
		self.message = message or self.default_message
		self.error = error
		super().__init__(self.message)

	def to_dict(self) -> dict[str, str]:
		body = {"message": self.message}
		if self.error is not None:
			body["error"] = self.error
		return body

class Unauthorized(ApiError):
	"""Raised when the request carries no credentials."""
	status_code = 401
	default_message = "Unauthorized"

class Forbidden(ApiError):
	"""Raised for a bad or expired token, or access to records the caller does not own."""
	status_code = 403
	default_message = "Forbidden"

class NotFound(ApiError):
	"""Raised when a record is absent or not visible to the caller."""
	status_code = 404
	default_message = "Not found"

class ValidationFailed(ApiError):
	status_code = 400
	default_message = "Invalid request"

class InternalError(ApiError):
	status_code = 500
